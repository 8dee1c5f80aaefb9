"""SQL queries used by MySQL column introspection."""

COLUMNS_QUERY = """
SELECT
  COLUMN_NAME,
  COLUMN_TYPE,
  COLUMN_KEY,
  EXTRA,
  DATA_TYPE,
  IS_NULLABLE,
  COLUMN_DEFAULT,
  COLUMN_COMMENT
FROM INFORMATION_SCHEMA.COLUMNS
WHERE TABLE_SCHEMA = %s
  AND TABLE_NAME = %s
ORDER BY ORDINAL_POSITION;
"""

HEALTHCHECK_QUERY = """
SELECT
  DATABASE(),
  CURRENT_USER(),
  VERSION(),
  @@session.transaction_read_only
"""

# MariaDB before 11.1 and MySQL before 5.7.20 only know tx_read_only.
LEGACY_HEALTHCHECK_QUERY = """
SELECT
  DATABASE(),
  CURRENT_USER(),
  VERSION(),
  @@session.tx_read_only
"""

READ_ONLY_INIT_COMMAND = "SET SESSION TRANSACTION READ ONLY"

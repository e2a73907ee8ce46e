# mysqlexport

mysqlexport writes a MySQL database out as plain SQL files. The structure
of every table and view goes to `schema.sql`. Up to a chosen number of rows
from each table and view go to `data.sql`. It can also pack both files
into `export.zip`.

## Installation

```
pip install .
```

## Usage

```
mysqlexport --database shop
```

If `--password` is not given or is empty, the command asks for the password
on the terminal (`Enter password: `) without echoing it.

Options:

| Option              | Default     | Meaning                                         |
|---------------------|-------------|-------------------------------------------------|
| `--host`            | `localhost` | Database server host                            |
| `--port`            | `3306`      | Database server port                            |
| `--user`            | `root`      | User name                                       |
| `--password`        | (prompt)    | Password                                        |
| `--database`        | (required)  | Database to export                              |
| `--rows`            | `1000`      | Maximum number of rows read from each table     |
| `--output`          | `./output`  | Directory the files are written to (created)    |
| `--compress [BOOL]` | true        | Also write `export.zip` holding both SQL files  |

`--compress` accepts `true`/`false`, `yes`/`no`, `on`/`off`, `1`/`0`,
`t`/`f` and `y`/`n`. Use `--compress false` to skip the archive.

Progress messages are printed as the export runs. If the export fails, the
command prints the error and exits with status 1. On success it exits with
status 0.

## What is written

`schema.sql` holds, for each table, `DROP TABLE IF EXISTS` followed by its
`CREATE TABLE` statement. The table's `AUTO_INCREMENT` option is reset to 1.
For each view it holds `DROP VIEW IF EXISTS` followed by its `CREATE VIEW`
statement.

`data.sql` holds `INSERT` statements with up to 1000 rows per statement.
The rows of an ordinary table are written between `LOCK TABLES ... WRITE;`
and `UNLOCK TABLES;`. Views are not locked, and if reading a view's rows
fails, a warning is printed and the export goes on.

Values are written as follows:

- `NULL` stays `NULL`.
- Strings and bytes are quoted, with special characters escaped.
- Dates and date-times are written as `'YYYY-MM-DD HH:MM:SS'`.
- Time durations are written as `'HH:MM:SS'`.
- Booleans are written as `1` or `0`.
- Numbers are written as they are.

Both files start with a comment header and `SET FOREIGN_KEY_CHECKS=0;`, and
end with `SET FOREIGN_KEY_CHECKS=1;`. This lets them be loaded regardless of
the order of the tables.

## Use from Python

```python
from mysqlexport.exporter import Config, Exporter

password = "password"
config = Config(database="shop", password=password, output="./dump")
with Exporter.from_config(config) as exporter:
    exporter.execute()
```

`Exporter.from_config` connects with `connect`, and raises `ExportError`
if the server cannot be reached. All export failures are raised as
`ExportError`. An `Exporter` can also be built from an existing connection
with `Exporter(config, connection)`.

The helpers in `mysqlexport.sqlformat` can be used on their own to build
SQL literals:

- `escape_string`
- `reset_auto_increment`
- `format_value`
- `format_timestamp`

## What it does not do

mysqlexport only writes files. It does not load them back into a server,
and it does not export triggers, stored routines, events or users.

## Running the tests

```
pip install ".[test]"
pytest
```
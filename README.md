# saaskit

Small, composable building blocks for the back end of a SaaS product.
The package has no runtime dependencies.

It is organised in four sub-packages:

- `saaskit.universal` – value models shared by every domain: names with
  URL slugs, descriptions, addresses and persons, positions and radars,
  prices, localizations, ratings and tags.
- `saaskit.filestore` – file systems and the records stored in them, a
  database-backed record table and an S3 upload wrapper.
- `saaskit.user` – users, their accounts and settings (radar and avatar),
  and a database-backed user repository.
- `saaskit.database` – a small database helper: running SQL scripts,
  creating and dropping schemas, and referring to table rows and relations.

## Models and solid wrappers

Each concept comes as a dataclass model (`NameModel`, `PriceModel`,
`AddressModel`, ...) with a `change()` method, an abstract interface
(`Name`, `Price`, `Address`, ...) with `model()` and `update()`, and a
*solid* wrapper (`SolidName`, `SolidPrice`, `SolidAddress`, ...). The solid
wrapper keeps the model in memory and, when given a delegate, passes every
update on to it:

```python
from saaskit.universal.name import SolidName, create_slug, slugged_name

create_slug("Hello World_Again!")     # "hello-world-again"

name = slugged_name("Summer Sale")    # value "Summer Sale", slug "summer-sale"
solid = SolidName(name, None)         # no delegate: in-memory only
solid.update(slugged_name("Winter Sale"))
solid.model().slug                    # "winter-sale"
```

Prices are held in minor units and formatted with two decimals:

```python
from saaskit.universal.price import PriceModel

PriceModel(value=1999, currency="NOK").user_friendly()   # "19.99 NOK"
```

Positions (`saaskit.universal.geo.PositionModel`) are integers in
millionths of a degree; `lat_f()` and `lon_f()` return degrees as floats.
A `RadarModel` pairs a position with a perimeter.

`saaskit.user.user.SolidUser` hands out `person()`, `address()`,
`settings()` and `account()` views over a `UserModel`, and `UserFs`
names the well-known per-user file systems (`UserFs.USER_AVATAR`).
`saaskit.filestore.record.NoRecords` is a record store that keeps nothing.

## Database persistence

`saaskit.database.pg` is driver-agnostic. You supply a `Pool`
implementation with three methods:

- `execute(sql, params)` – run a statement,
- `query(sql, params)` – return all rows as sequences,
- `query_row(sql, params)` – return the first row, raising `NoRowsError`
  when there is none.

Statements use `$1`-style positional parameters (passed as a tuple) or
`@name` named parameters (passed as a dict), so the pool should accept
what its driver needs.

- `new_pg(connect)` reads the `DATABASE_URL` environment variable, calls
  `connect(url)` to get a pool and checks it with `select version()`.
  A missing URL raises `DatabaseConfigError`; a failing connection or check
  raises `DatabaseError`.
- `PgDb.execute_sqls()` runs statements in order, skipping blank ones;
  `PgDb.execute_file(root, path)` and `execute_from_file(path, connect)`
  split a script on `;` and run it.
- `DefaultSchema(db, root)` runs `ddl/create.sql` and `ddl/drop.sql`
  found under the path `root`.
- `TableEntity` and `RelationEntity` name a row and the rows related to it.

On top of this:

- `saaskit.universal.pg_fields` – `PgAddress`, `PgDescription`, `PgName`,
  `PgPerson`, `PgPosition`, `PgPrice` update the matching columns of a
  row; `use_map_name()` and `use_map_description()` fill models from row
  columns.
- `saaskit.universal.pg_localization` – `PgLocalizations.add()` inserts a
  slugged translation for an owner; `PgLocalization.update()` changes it.
- `saaskit.filestore.pg_records` – `PgRecords.add()` inserts into
  `filestore_record`; `PgRecord.model()` reads a row back and
  `PgRecord.update()` changes its name.
- `saaskit.user.pg_users` – `PgUsers.add()`, `by_id()`, `list_all()`,
  `search().by_phone()` and `establish_account()` manage the `users` table;
  `user_row_scan()` fills a `UserModel` from a row.

## S3 uploads

`saaskit.filestore.s3.AmazonS3Records` uploads each record's file (its
`url`, a local path) to a bucket under the record's name slug, waits for
the object to exist, then passes the record to another `Records` store.
Build one with `amazon_s3_records_from_client(s3_client, bucket_name,
records)`. The client is not created for you: pass any object offering
`put_object(Bucket=, Key=, Body=)` and `get_waiter("object_exists")`.
Failures are logged and re-raised.

## What the package does not do

- It ships no database driver and no SQL schema files; you provide the
  `Pool` and the `ddl/` scripts.
- Ratings are not persisted: `PgRatings.add()` and `by_id()` return
  in-memory ratings with no model, and `PgRating` holds no columns.
- Database-backed file systems are not implemented: `PgUser.file_system()`
  returns `None`, `PgFileSystem` stores nothing and its `records()` returns
  `None`, and `PgFileSystems` only holds the database handle.
- `PgUserSettings.model()` and `radar()` return `None`; only the avatar is
  stored.
- `SolidRatings` only forwards to the store it wraps.
- There is no command-line tool or server.

## Running the tests

```
pip install -e ".[test]"
pytest
```
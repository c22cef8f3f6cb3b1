"""Database handle over a pluggable pool, SQL scripts, schemas and table entities."""
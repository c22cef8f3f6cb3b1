"""Users, accounts, settings and a database-backed user repository."""
"""File systems and records, with database and S3 record stores."""
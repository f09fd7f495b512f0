from databases import Database

from leagueboard.config import config

database = Database(config.pg_dsn)

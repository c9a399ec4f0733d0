from dotenv import load_dotenv
from pathlib import Path
import logging
import os
from sqlalchemy import text

load_dotenv(dotenv_path=Path(__file__).with_name(".env"), override=True)

from portfolio.db.engine import make_engine, make_session_factory, init_db  # import AFTER load_dotenv
from portfolio.services.seed_users import seed_default_users


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    dsn = os.environ.get("DATABASE_URL")
    if not dsn:
        raise SystemExit("DATABASE_URL is not set. Put it in your .env")

    engine = make_engine(dsn)
    print("Creating tables…")
    init_db(engine)
    # simple connectivity check
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    seed_default_users(make_session_factory(engine))
    print("Done.")


if __name__ == "__main__":
    main()

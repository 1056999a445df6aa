"""
Create the site admin account, or reset its password
Run this once after deploying, and whenever the admin password is lost:

    python reset_admin_password.py --email admin@wesleyhigh.edu --password 'new-password'
"""
import argparse
import asyncio
import getpass
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import ADMIN_EMAIL, ADMIN_PASSWORD, DATABASE_URL
from app.database import Database
from app.apps.authentication.utils import upsert_admin

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create or reset the site admin account")
    parser.add_argument("--email", default=ADMIN_EMAIL, help=f"admin email (default: {ADMIN_EMAIL})")
    parser.add_argument("--username", default=None, help="optional login username")
    parser.add_argument("--password", default=ADMIN_PASSWORD or None, help="new password (prompted when omitted)")
    parser.add_argument("--create-tables", action="store_true", help="create missing tables and default pages first")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    args = parse_args(argv)
    password = args.password or getpass.getpass("New admin password: ")
    if not password:
        logger.error("A password is required")
        return 1

    database = Database(DATABASE_URL)
    try:
        await database.open()
        if args.create_tables:
            await database.create_all()
        async with database.sessionmaker() as session:
            user = await upsert_admin(session, args.email, password, args.username)
        logger.info(f"Admin account ready: {user.email} (id {user.id})")
        return 0
    except Exception as e:
        logger.error(f"Could not reset the admin password: {str(e)}", exc_info=True)
        return 1
    finally:
        await database.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

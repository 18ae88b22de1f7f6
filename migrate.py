"""
Apply database migrations without starting the web server.

Usage:
  python migrate.py

Runs the Alembic revisions under migrations/ through Flask-Migrate.
"""

import os
import sys


def main():
    # Schema comes from the revisions below, not from startup DDL.
    os.environ['RUN_STARTUP_DDL'] = '0'

    import assessment_book
    from flask_migrate import upgrade

    try:
        print("Applying database migrations...")
        with assessment_book.app.app_context():
            upgrade(directory='migrations')
        print("Migrations completed successfully.")
    except Exception as e:
        print(f"Migration failed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()

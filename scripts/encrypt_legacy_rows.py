"""
Encrypt personal data stored before ENCRYPTION_KEY was set.

Idempotent: values that already decrypt under the current key are skipped.

Usage: ENCRYPTION_KEY=... python scripts/encrypt_legacy_rows.py
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal
from app.logging_config import configure_logging
from app.services.reencryption import reencrypt_legacy_rows


def main():
    configure_logging()
    db = SessionLocal()
    try:
        counts = reencrypt_legacy_rows(db)
        db.commit()
        print("\n=== LEGACY ROWS ENCRYPTED ===")
        for label, count in counts.items():
            print(f"  {label}: {count}")
        print("\n[OK] Commit done.")
    except Exception as e:
        db.rollback()
        print(f"\n[ERROR] Rollback. {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()

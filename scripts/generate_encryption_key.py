"""
Print a new random master key for ENCRYPTION_KEY.

Usage: python scripts/generate_encryption_key.py
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.services.encryption import generate_key


if __name__ == "__main__":
    print(generate_key())

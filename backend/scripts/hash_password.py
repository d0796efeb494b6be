# backend/scripts/hash_password.py
"""Prints the bcrypt hash to put into ADMIN_PASSWORD."""
import sys
import os
import getpass

# Path Setup
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

from faqaas.utils.security import get_password_hash

if __name__ == "__main__":
    password = sys.argv[1] if len(sys.argv) > 1 else getpass.getpass("Admin password: ")
    if not password:
        sys.exit("Empty password")
    print(get_password_hash(password))

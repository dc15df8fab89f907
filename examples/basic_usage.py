"""
Basic usage example of key encryption.

This example encrypts a private key with a password, prints the SEC_ string
and decrypts it again.
"""

import logging
import sys
from pathlib import Path

# Add the project root to the path to import seckey
sys.path.insert(0, str(Path(__file__).parent.parent))

from seckey import EncryptedPrivateKey, PrivateKey, SecurityLevel, encrypt
from seckey.common.exceptions import InvalidPassword


def main() -> None:
    # Configure logging
    logging.basicConfig(level=logging.DEBUG)
    logger = logging.getLogger(__name__)

    try:
        key = PrivateKey.from_string("5JZAVLoiZWc5u4JsmFXfZa7MfBsf7axQy2nu5ztrQitukEhmLzE")
        logger.info("Public key: %s", key.public_key())

        encrypted = encrypt(key, "foobar", SecurityLevel.DEFAULT)
        logger.info("Encrypted key: %s (%s)", encrypted, encrypted.security_level)

        decrypted = EncryptedPrivateKey.from_string(str(encrypted)).decrypt("foobar")
        logger.info("Decrypted key matches: %s", decrypted == key)

        try:
            encrypted.decrypt("hunter1")
        except InvalidPassword:
            logger.info("Wrong password rejected")

        logger.info("Basic usage example completed")
    except Exception:
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()

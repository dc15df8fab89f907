"""
Background usage example of key encryption.

This example runs the expensive scrypt derivation on a worker thread while
the main thread keeps doing other work.
"""

import logging
import sys
import time
from pathlib import Path

# Add the project root to the path to import seckey
sys.path.insert(0, str(Path(__file__).parent.parent))

from seckey import PrivateKey, SecurityLevel, decrypt_in_background, encrypt_in_background


def main() -> None:
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    try:
        key = PrivateKey.generate()
        future = encrypt_in_background(key, "foobar", SecurityLevel.HIGH)

        # Main thread can perform other work
        while not future.done():
            logger.info("Main thread working while scrypt runs...")
            time.sleep(0.1)

        encrypted = future.result()
        logger.info("Encrypted key: %s", encrypted)

        decrypted = decrypt_in_background(encrypted, "foobar").result()
        logger.info("Decrypted key matches: %s", decrypted == key)

        logger.info("Background usage example completed")
    except Exception:
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()

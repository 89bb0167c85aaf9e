"""Mock transport configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Acting user, reported as "from" in event payloads
    SELF_USER_ID = os.getenv(
        "MOCK_SELF_USER_ID", "3f49da1d-0d52-4696-9ef3-0dd181383e8a"
    )

    # Simulated sharing link (fixed values, never derived from state)
    CONVERSATION_LINK_URI = os.getenv(
        "MOCK_CONVERSATION_LINK_URI", "https://wire-website.com/test-link"
    )
    CONVERSATION_LINK_KEY = os.getenv("MOCK_CONVERSATION_LINK_KEY", "test-key")
    CONVERSATION_LINK_CODE = os.getenv("MOCK_CONVERSATION_LINK_CODE", "test-code")

    # Logging
    SETUP_LOGGING = os.getenv("MOCK_SETUP_LOGGING", "false").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

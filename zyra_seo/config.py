"""Environment configuration for the SEO engine."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = os.getenv("ZYRA_DEFAULT_MODEL", "claude-haiku-4-5-20251001")
ANALYSIS_MODEL = os.getenv("ZYRA_ANALYSIS_MODEL", "claude-sonnet-4-5")
REQUEST_TIMEOUT = float(os.getenv("ZYRA_REQUEST_TIMEOUT", "60"))

DEFAULT_TEMPERATURE = 0.7
GENERATION_MAX_TOKENS = 1500

ANALYSIS_TEMPERATURE = 0.3
ANALYSIS_MAX_TOKENS = 2000

SHOPIFY_TITLE_LIMIT = 255

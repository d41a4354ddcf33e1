"""
Configuration - Environment-driven settings for the SkillPath API
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Provider ---
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
# Which Gemini client library to build the adapter from: "genai" or "generativeai"
GEMINI_SDK = os.getenv("GEMINI_SDK", "genai")

# Model selection policy (fixed, not read from the environment)
PREFERRED_MODEL_FAMILY = "gemini-2.5"
FALLBACK_MODEL_NAME = "models/gemini-2.5-flash"
MODEL_LIST_PAGE_SIZE = 50

# --- Server ---
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "public"))

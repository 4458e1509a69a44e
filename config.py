import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'

    # Booking API, reached from the server for both reads and writes
    BOOKING_API_URL = os.getenv("BOOKING_API_URL", "http://backend:5000")
    BOOKING_API_TIMEOUT = float(os.getenv("BOOKING_API_TIMEOUT", 10))

    # Presentation: one of THEMES
    UI_THEME = os.getenv("UI_THEME", "pink")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

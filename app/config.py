import os
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase credentials (service role bypasses RLS)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

# Realtime broadcast topic for task events
TASKS_CHANNEL = os.getenv("TASKS_CHANNEL", "tasks-channel")

# Placeholder tenant_id; should be derived from the caller in production
PLACEHOLDER_TENANT_ID = os.getenv("PLACEHOLDER_TENANT_ID", "00000000-0000-0000-0000-000000000000")

# Timezone used for "today" (empty means the server's local zone)
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "")


def get_local_timezone() -> Optional[tzinfo]:
    """Configured local timezone, or None for the server's local zone"""
    if APP_TIMEZONE:
        return ZoneInfo(APP_TIMEZONE)
    return None

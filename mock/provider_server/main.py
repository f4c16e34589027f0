from datetime import date, datetime, timedelta, timezone
from fastapi import FastAPI
from pathlib import Path
from pydantic import BaseModel
import json
import os

from limit_gateway.domain.tiers import default_tiers, resolve_limit_for_account

app = FastAPI(title="Mock Spending Data Provider", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/provider_stub") if os.path.exists("/provider_stub") else Path(__file__).resolve().parents[1] / "provider_stub"
TIERS = default_tiers()


class RpcParams(BaseModel):
    p_user_id: str


def load_user(user_id: str):
    users = json.loads((DATA_DIR / "users.json").read_text())
    return users.get(user_id)


@app.get("/health")
def health(): return {"status": "ok"}


@app.post("/rpc/get_user_spending_limit")
def get_user_spending_limit(params: RpcParams):
    user = load_user(params.p_user_id)
    if user is None:
        return {"success": False, "error": "User not found"}
    created_at = datetime.now(timezone.utc) - timedelta(days=user["created_days_ago"])
    record = resolve_limit_for_account(created_at, TIERS)
    return {
        "success": True,
        "daily_limit": user.get("daily_limit", float(record.daily_limit)),
        "limit_type": record.limit_type.value,
        "account_age_days": record.account_age_days,
        "account_created_at": created_at.isoformat(),
    }


@app.post("/rpc/get_user_daily_spending")
def get_user_daily_spending(params: RpcParams):
    user = load_user(params.p_user_id) or {}
    return {
        "success": True,
        "total_spent": user.get("total_spent", 0),
        "transaction_count": user.get("transaction_count", 0),
        "spending_date": date.today().isoformat(),
    }

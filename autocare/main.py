import logging

from fastapi import FastAPI

from autocare.api.v1.payments import router as payments_router
from autocare.api.v1.pricing import router as pricing_router
from autocare.api.v1.providers import router as providers_router
from autocare.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("service_id", "category", "promo_code", "user_id", "amount", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="AutoCare Pricing", version="1.0.0")

app.include_router(pricing_router, prefix="/api/v1", tags=["pricing"])
app.include_router(payments_router, prefix="/api/v1", tags=["payments"])
app.include_router(providers_router, prefix="/api/v1", tags=["providers"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}

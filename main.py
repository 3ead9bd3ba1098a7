# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routes import actions, admin
from database import client
from config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL
import uvicorn

logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO), format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Hotel Booking API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(actions.router, prefix="/api")
app.include_router(admin.router, prefix="/api/admin")


@app.get("/")
async def root():
    return {
        "message": "Hotel Booking API",
        "read": "GET /api/?action=get_bookings|get_reviews",
        "write": "POST /api/ {action: book|update_booking|add_review}",
    }

@app.on_event("shutdown")
def shutdown_db_client():
    logger.info("Closing MongoDB client")
    client.close()

if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)

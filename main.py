# main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from database import connector
from routes import students

logger = logging.getLogger(__name__)

app = FastAPI(title="Student Records API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(students.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    db_name = config.get_database_name()
    await connector.get_handle(db_name)
    logger.info(f"Using database: {db_name}")


@app.on_event("shutdown")
async def shutdown_event():
    connector.close()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)

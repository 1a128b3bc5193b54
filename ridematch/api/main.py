"""
FastAPI app for the carpool ride assignment.

HTTP layer over the assign_rides use case.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ridematch.api.router import router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = FastAPI(
    title="Ridematch API",
    description="Daily carpool seat assignment with swap local search",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
def root():
    """Root endpoint"""
    return {"message": "Ridematch API", "status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.settings import get_settings
from .db import Base, engine
from . import models  # noqa: F401  registers tables on Base.metadata
from .routers import bakeries, clients, products

settings = get_settings()
logging.basicConfig(level=settings.log_level, format=settings.log_format)

app = FastAPI(
    title="Bakery Catalog API",
    description="Backend API for managing bakery clients, bakeries and products",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(clients.router)
app.include_router(products.router)
app.include_router(bakeries.router)


@app.on_event("startup")
def create_tables():
    # Tables are created directly from the models; there are no migrations
    Base.metadata.create_all(bind=engine)

@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "Bakery Catalog API is running"}

@app.get("/")
async def root():
    return {"message": "Welcome to Bakery Catalog API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("bakery_catalog.main:app", host="0.0.0.0", port=8000, reload=True)

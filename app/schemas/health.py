from pydantic import BaseModel, Field


class DatabaseStatus(BaseModel):
    """Database status nested in the health check."""

    status: str = Field(description="'up' when a trivial query succeeds, else 'down'")
    dialect: str = Field(description="SQLAlchemy dialect name")


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    database: DatabaseStatus = Field(description="Status of the relational store")

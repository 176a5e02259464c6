"""Pydantic models for API responses."""

from pydantic import BaseModel, Field


class TitleResponse(BaseModel):
    """Response model for title endpoints."""

    title: str | None = Field(description="Current cached title, null if none yet")


class TapsResponse(BaseModel):
    """Response model for the taps endpoint."""

    taps: str = Field(description="Tap counter text, e.g. \"3 taps\"")


class SnackbarResponse(BaseModel):
    """Response model for snackbar endpoints."""

    message: str | None = Field(description="Pending snackbar message, null if none")


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(description="Health status")
    version: str = Field(description="Application version")

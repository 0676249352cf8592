from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class PatternConfig(BaseModel):
    """Immutable parameters of a single cut pattern."""

    draft_mode: bool = Field(default=False, description="Overlay grid markers, grid lines and tiles")
    pieces_x: int = Field(default=10, ge=0, description="Number of grid cells along x")
    pieces_y: int = Field(default=7, ge=0, description="Number of grid cells along y")
    pixels_per_cell: int = Field(default=100, gt=0, description="Size of a grid cell in pixels")
    seed: int = Field(default=0, description="Seed of the random stream")
    grid_perturb: int = Field(default=10, ge=0, description="Perturbation and snap radius in pixels")

    class Config:
        """Pydantic configuration class."""

        frozen = True

    @property
    def width(self) -> int:
        """Canvas width in pixels."""
        return self.pieces_x * self.pixels_per_cell

    @property
    def height(self) -> int:
        """Canvas height in pixels."""
        return self.pieces_y * self.pixels_per_cell


class Settings(BaseSettings):
    """Application settings configuration."""

    # API settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Puzzle Pattern API"

    # CORS settings
    BACKEND_CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Pattern defaults
    DRAFT_MODE: bool = False
    PIECES_X: int = 10
    PIECES_Y: int = 7
    PIXELS_PER_CELL: int = 100
    SEED: int = 0
    GRID_PERTURB: int = 10

    class Config:
        """Pydantic configuration class."""

        case_sensitive = True
        env_file = ".env"

    def pattern_config(self) -> PatternConfig:
        """Build the default pattern configuration from these settings."""
        return PatternConfig(
            draft_mode=self.DRAFT_MODE,
            pieces_x=self.PIECES_X,
            pieces_y=self.PIECES_Y,
            pixels_per_cell=self.PIXELS_PER_CELL,
            seed=self.SEED,
            grid_perturb=self.GRID_PERTURB,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create instance
settings = get_settings()

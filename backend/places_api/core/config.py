from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # MongoDB Configuration (required, the app refuses to start without it)
    MONGODB_URI: str
    MONGO_DB_NAME: str = "stockholm-places"
    PLACES_COLLECTION: str = "places"

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    # Google Maps JavaScript API
    GOOGLE_MAPS_API_KEY: str = ""
    MAPS_SCRIPT_BASE_URL: str = "https://maps.googleapis.com/maps/api/js"
    MAPS_SCRIPT_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def maps_script_url(self) -> str:
        return f"{self.MAPS_SCRIPT_BASE_URL}?key={self.GOOGLE_MAPS_API_KEY}&libraries=places"

settings = Settings()

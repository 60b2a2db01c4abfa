from pydantic_settings import BaseSettings

DEFAULT_AIRLINE_DIRECTORY: dict[str, str] = {
    "Delta Airlines": "http://127.0.0.1:9000",
    "Alaska Airlines": "http://127.0.0.1:9001",
    "Qatar Airways": "http://127.0.0.1:9002",
    "Singapore Airlines": "http://127.0.0.1:9003",
    "Japan Airlines": "http://127.0.0.1:9004",
    "JetBlue": "http://127.0.0.1:9005",
    "Hawaiian Airlines": "http://127.0.0.1:9006",
    "British Airways": "http://127.0.0.1:9007",
    "Korean air": "http://127.0.0.1:9008",
    "Lufthansa": "http://127.0.0.1:9009",
}


class Settings(BaseSettings):
    # Server
    host: str = "localhost"
    port: int = 8080

    # Airline backends (name -> base address)
    airline_directory: dict[str, str] = dict(DEFAULT_AIRLINE_DIRECTORY)
    backend_timeout_seconds: float = 5.0
    search_deadline_seconds: float = 10.0

    # Demo mode: canned flights, random confirmation codes
    use_fake_airlines: bool = False

    # Auth
    auth_cookie_name: str = "flight_reservation_auth"
    auth_tokens: set[str] = {"abcd", "aabbccc"}

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    secret_key: str = "change-me-in-production"
    app_env: str = "development"  # "production" enables strict checks (JWT key pair)
    # JWT: use RS256 when JWT_PRIVATE_KEY and JWT_PUBLIC_KEY are set; otherwise HS256 with SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_private_key: str = ""  # PEM string for RS256 (multi-line in .env: use \n)
    jwt_public_key: str = ""    # PEM string for RS256
    access_token_expire_minutes: int = 60 * 24  # 24 hours
    cors_origins: str = "http://localhost:5173,http://localhost:5000"
    enable_hsts: bool = False  # Set True in production behind HTTPS
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    rate_limit_default: str = "200/minute"

    # Demo catalog of 12 exercises inserted when the store is built
    seed_exercises: bool = True

    # WOD generator
    google_gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_request_timeout_seconds: int = 90

    @property
    def use_rs256(self) -> bool:
        """True if RSA keys are set and RS256 should be used."""
        return bool(self.jwt_private_key.strip() and self.jwt_public_key.strip())

    def validate_jwt_config(self) -> None:
        """Raise if production config is inconsistent (e.g. only one RSA key set)."""
        if self.app_env != "production":
            return
        has_private = bool(self.jwt_private_key.strip())
        has_public = bool(self.jwt_public_key.strip())
        if has_private and not has_public:
            raise RuntimeError("JWT_PRIVATE_KEY is set but JWT_PUBLIC_KEY is missing in production")
        if has_public and not has_private:
            raise RuntimeError("JWT_PUBLIC_KEY is set but JWT_PRIVATE_KEY is missing in production")
        if self.secret_key == "change-me-in-production" and not self.use_rs256:
            raise RuntimeError("SECRET_KEY must be changed in production")


settings = Settings()

from os import getenv

class Settings:
    PORT = int(getenv("PORT", "3000"))
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://tasks:tasks@db:5432/tasks")
    AUTH_VALIDATE_URL = getenv("AUTH_VALIDATE_URL", "https://ms-auth-chi.vercel.app/ms/auth/validate-token")
    AUTH_TIMEOUT_SECONDS = float(getenv("AUTH_TIMEOUT_SECONDS", "10"))  # le ms auth ne doit pas bloquer une requête indéfiniment
    CORS_ORIGIN = getenv("CORS_ORIGIN", "http://localhost:4200")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

settings = Settings()

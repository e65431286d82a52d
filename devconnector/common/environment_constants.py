DATABASE_URL = "DATABASE_URL"
LOG_LEVEL = "LOG_LEVEL"
JWT_SECRET = "JWT_SECRET"
GITHUB_TOKEN = "GITHUB_TOKEN"

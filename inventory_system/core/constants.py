LOW_STOCK_THRESHOLD = 10

DEFAULT_CATEGORY = "Uncategorized"

USER_ROLES = ("admin", "user")

API_PREFIX = "/api"

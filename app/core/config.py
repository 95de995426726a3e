from config import Config, Environment  # api specific config
CFG = Config[Environment]

PROJECT_NAME = "CodePrep"
API_V1_STR = "/api"

PAGE_SIZE = CFG.pageSize
ADMIN_PAGE_SIZE = CFG.adminPageSize
SEARCH_LIMIT = CFG.searchLimit

class InternalURIs:
    API = "/api"
    ADMIN = API + "/admin"
    ADMIN_AUTH = ADMIN + "/auth"
    ADMIN_VERIFY = ADMIN + "/verify"
    ADMIN_PROJECTS = ADMIN + "/projects"
    ADMIN_RESUME = ADMIN + "/resume"
    SITE_CONFIG = API + "/config"
    HEALTHZ = "/healthz"


class DocumentNames:
    PROJECTS = "projects.json"
    CONFIG = "config.json"


BEARER_PREFIX = "Bearer "

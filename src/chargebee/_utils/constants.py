# Environment variables
ENV_SITE = "CHARGEBEE_SITE"
ENV_API_KEY = "CHARGEBEE_API_KEY"
ENV_BASE_URL = "CHARGEBEE_BASE_URL"
ENV_CHARSET = "CHARGEBEE_CHARSET"
ENV_DEBUG = "CHARGEBEE_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_ACCEPT_CHARSET = "Accept-Charset"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
APPLICATION_JSON = "application/json"
FORM_URLENCODED = "application/x-www-form-urlencoded"

# Defaults
DEFAULT_CHARSET = "UTF-8"
DEFAULT_PROTOCOL = "https"
DEFAULT_DOMAIN_SUFFIX = "chargebee.com"
DEFAULT_API_VERSION = "v2"
DEFAULT_CONNECT_TIMEOUT = 30.0
DEFAULT_READ_TIMEOUT = 80.0

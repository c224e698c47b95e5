"""
Constants for Pusher client library.
Values follow the Pusher REST API documentation.
"""

# REST endpoint
API_ENDPOINT = "https://api.pusherapp.com"

# Authentication (http://pusher.com/docs/rest_api#authentication)
AUTH_VERSION = "1.0"
AUTH_SIGNATURE_PARAM = "auth_signature"

# An event can be sent to at most this many channels
LIMIT_CHANNELS = 100

# Only presence channels expose their subscribed users
PRESENCE_PREFIX = "presence-"

CONTENT_TYPE_JSON = "application/json"

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': API_ENDPOINT,
    'timeout': 30,              # HTTP timeout in seconds
}

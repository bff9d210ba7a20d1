DEFAULT_API_ENDPOINT = "https://api.criticalmaps.net/"
DEFAULT_USER_AGENT = "CriticalMaps Python Client"

# Accepted status codes: 200 up to and including 298
VALID_HTTP_RESPONSE_CODES = range(200, 299)

JSON_CONTENT_TYPE = "application/json"

# How long a blocking call waits for the transport to acknowledge a cancel
CANCEL_GRACE_SECONDS = 2.0

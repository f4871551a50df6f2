# Models
DEFAULT_MODEL_NAME = "gemini-2.0-flash-001"
DEFAULT_LOCATION = "us-central1"

# Generation
TEMPERATURE = 0.2

# Environment variables
ENV_PROJECT_ID = "GOOGLE_CLOUD_PROJECT"
ENV_LOCATION = "LOCATION_PRJ"
ENV_MODEL_NAME = "MODEL_NAME"
ENV_LOG_LEVEL = "LOG_LEVEL"

# HTTP
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "3600",
}
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
REQUEST_FIELD = "abapCode"

# Response messages
MSG_CONFIG_ERROR = "Environment variables not set correctly."
MSG_METHOD_NOT_ALLOWED = "Method Not Allowed"
MSG_MISSING_FIELD = f"Bad Request: Missing {REQUEST_FIELD} in request body"
MSG_INVALID_FIELD = f"Bad Request: {REQUEST_FIELD} must be a non-empty string"
MSG_NO_VALID_RESPONSE = "Error: No valid response from the model"
MSG_PROCESSING_ERROR = "Error processing request: {error}"

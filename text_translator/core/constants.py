# Microsoft Translator Text API
DEFAULT_TRANSLATOR_ENDPOINT = "https://api.cognitive.microsofttranslator.com"
DEFAULT_API_VERSION = "3.0"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0

TRANSLATE_PATH = "/translate"
DETECT_PATH = "/detect"
LANGUAGES_PATH = "/languages"

# Request headers
SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
SUBSCRIPTION_REGION_HEADER = "Ocp-Apim-Subscription-Region"
CLIENT_TRACE_ID_HEADER = "X-ClientTraceId"

# Literal (do-not-translate) markup
LITERAL_OPEN_TAG = "<literal>"
LITERAL_CLOSE_TAG = "</literal>"

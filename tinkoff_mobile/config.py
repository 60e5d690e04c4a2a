"""Configuration constants for the Tinkoff Mobile web API client."""

URI_BASE   = "https://www.tinkoff.ru"
URI_MOBILE = "/api/mobile-operator"

# Endpoint paths, relative to the base origin
SESSION_PATH               = URI_MOBILE + "/util/session"
SESSION_STATUS_PATH        = URI_MOBILE + "/util/session_status"
SIGNUP_PHONE_PATH          = URI_MOBILE + "/auth/signup_by_phone_web"
CONFIRM_SIGNUP_PHONE_PATH  = URI_MOBILE + "/auth/confirm_signup_by_phone_web"
CONTRACTS_INFO_PATH        = URI_MOBILE + "/user/contracts_info"
SUBSCRIBER_SERVICES_PATH   = URI_MOBILE + "/user/subscriber_services"
BUNDLE_ACCOUNTS_PATH       = URI_MOBILE + "/user/bundle_accounts"
AUTO_PAYMENTS_PATH         = URI_MOBILE + "/payment/get_autopayments"

# Sent with every request; the web frontend identifies itself this way
PLATFORM = "web"
ORIGIN   = "web,ib5,platform"
APP_NAME = "mvno"

RESULT_OK = "OK"

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json",
    "Connection": "keep-alive",
}

UNKNOWN_AUTHORITY_GUIDANCE = (
    "If you are using self-signed certificates you can re-run this command with\n"
    "the --no-ssl-verify flag. Note however that disabling ssl verification\n"
    "means that cbsummary will be vulnerable to man-in-the-middle attacks.\n\n"
    "For the most secure access to Couchbase make sure that you have X.509\n"
    "certificates set up in your cluster and use the --cacert flag to specify\n"
    "the certificate authority that signed them."
)


class CBSummaryError(Exception):
    """Base exception for cbsummary."""

    pass


class ConfigurationError(CBSummaryError):
    """Base exception for problems detected before any cluster is contacted."""

    pass


class ClusterConfigError(ConfigurationError):
    """Raised when the cluster configuration file is missing, unreadable or malformed."""

    pass


class ReportModeError(ConfigurationError):
    """Raised when mutually exclusive report modes are requested together."""

    pass


class OutputError(CBSummaryError):
    """Raised when the report cannot be serialized or written."""

    pass


class RestClientError(CBSummaryError):
    """Raised when a request to a cluster node fails."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(str(self))

    def __str__(self):
        return f"Rest client error ({self.method} {self.url}): {self.reason}"


class TransportError(RestClientError):
    """Network, DNS, TLS or timeout failure before an HTTP status was received."""

    pass


class UnknownAuthorityError(TransportError):
    """The node presented a certificate signed by an authority we do not trust."""

    def __str__(self):
        return f"{self.reason}\n\n{UNKNOWN_AUTHORITY_GUIDANCE}"


class ResponseDecodeError(RestClientError):
    """The node answered, but the body is not the JSON document we expected."""

    pass


class HttpError(RestClientError):
    """The node answered with a status outside {200, 201, 202}."""

    def __init__(self, status_code: int, method: str, url: str, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(method, url, body)

    def __str__(self):
        return f'Received error {self.status_code} while executing "{self.method} {self.url}"'


class BadRequestError(HttpError):
    def __str__(self):
        return f"Bad request executing {self.method} {self.url} due to {self.body}"


class UnauthorizedError(HttpError):
    def __str__(self):
        return f'Authentication error executing "{self.method} {self.url}" check username and password'


class ForbiddenError(HttpError):
    """403 response; `body` holds the server message and missing permissions when provided."""

    def __str__(self):
        if self.body:
            return self.body
        return f'Forbidden executing "{self.method} {self.url}" check the permissions of this user'


class ServerError(HttpError):
    def __str__(self):
        return (
            f'Internal server error while executing "{self.method} {self.url}" '
            "check the server logs for more details"
        )


class UnexpectedStatusError(HttpError):
    pass

"""Keys and values used in credential request and issuable-credential JSON."""

FORMAT = "format"
DOCTYPE = "doctype"
CLAIMS = "claims"

MSO_MDOC = "mso_mdoc"

ISSUE_DATE = "issue_date"
EXPIRY_DATE = "expiry_date"

INVALID_CREDENTIAL_REQUEST = "invalid_credential_request"
INVALID_REQUEST = "invalid_request"

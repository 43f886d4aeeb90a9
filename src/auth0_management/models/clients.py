from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from auth0_management.query import QueryModel


class ClientApplicationType(str, Enum):
    """Application type of a client. Values are the wire tokens."""

    NATIVE = "native"
    SPA = "spa"
    REGULAR_WEB = "regular_web"
    NON_INTERACTIVE = "non_interactive"
    RMS = "rms"
    BOX = "box"
    CLOUDBEES = "cloudbees"
    CONCUR = "concur"
    DROPBOX = "dropbox"
    MSCRM = "mscrm"
    ECHOSIGN = "echosign"
    EGNYTE = "egnyte"
    NEWRELIC = "newrelic"
    OFFICE365 = "office365"
    SALESFORCE = "salesforce"
    SENTRY = "sentry"
    SHAREPOINT = "sharepoint"
    SLACK = "slack"
    SPRINGCM = "springcm"
    ZENDESK = "zendesk"
    ZOOM = "zoom"


class TokenEndpointAuthMethod(str, Enum):
    NONE = "none"
    CLIENT_SECRET_POST = "client_secret_post"
    CLIENT_SECRET_BASIC = "client_secret_basic"


class JwtConfiguration(BaseModel):
    lifetime_in_seconds: Optional[int] = Field(None, description="Lifetime of issued id tokens")
    secret_encoded: Optional[bool] = Field(None, description="Whether the client secret is base64 encoded")
    scopes: Optional[Dict[str, Any]] = None
    alg: Optional[str] = Field(None, description="Signing algorithm, e.g. HS256 or RS256")

    model_config = ConfigDict(extra="allow")


class ClientBase(BaseModel):
    name: Optional[str] = Field(None, description="Name of the client")
    description: Optional[str] = Field(None, max_length=140, description="Free text description")
    logo_uri: Optional[str] = Field(None, description="URL of the client logo")
    app_type: Optional[ClientApplicationType] = Field(None, description="Type of application")
    is_first_party: Optional[bool] = Field(None, description="Whether this is a first party client")
    oidc_conformant: Optional[bool] = Field(None, description="Whether the client is OIDC conformant")
    callbacks: Optional[List[str]] = Field(None, description="Allowed callback URLs")
    allowed_origins: Optional[List[str]] = Field(None, description="Allowed CORS origins")
    web_origins: Optional[List[str]] = Field(None, description="Allowed web message origins")
    allowed_logout_urls: Optional[List[str]] = Field(None, description="Allowed post-logout redirect URLs")
    grant_types: Optional[List[str]] = Field(None, description="Grant types the client may use")
    sso: Optional[bool] = None
    sso_disabled: Optional[bool] = None
    cross_origin_auth: Optional[bool] = None
    token_endpoint_auth_method: Optional[TokenEndpointAuthMethod] = None
    jwt_configuration: Optional[JwtConfiguration] = None
    client_metadata: Optional[Dict[str, str]] = Field(None, description="Free form string metadata")


class Client(ClientBase):
    """
    A client (application registration) as returned by the API.

    ``client_secret`` holds the secret exactly as the server sent it; no
    decoding is applied.
    """

    client_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("client_id", "id"),
        description="Client unique identifier",
    )
    tenant: Optional[str] = None
    client_secret: Optional[str] = Field(None, description="Client secret")
    is_global: Optional[bool] = Field(None, description="Whether this is the tenant's global client")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def id(self) -> Optional[str]:
        return self.client_id


class ClientCreateRequest(ClientBase):
    name: str = Field(min_length=1, description="Name of the client")

    model_config = ConfigDict(extra="allow")


class ClientUpdateRequest(ClientBase):
    """Partial update; only fields that were explicitly set are sent."""

    client_secret: Optional[str] = Field(None, description="New client secret")

    model_config = ConfigDict(extra="allow")


class ClientListQuery(QueryModel):
    page: Optional[int] = Field(None, description="Zero-based page index")
    per_page: Optional[int] = Field(None, description="Number of results per page")
    include_totals: Optional[bool] = Field(None, description="Ask the server for paging totals")
    fields: Optional[str] = Field(None, description="Comma separated list of fields to include or exclude")
    include_fields: Optional[bool] = Field(None, description="Whether the listed fields are included or excluded")
    is_global: Optional[bool] = Field(None, description="Filter on the global client flag")
    is_first_party: Optional[bool] = Field(None, description="Filter on the first party flag")
    app_type: Optional[List[ClientApplicationType]] = Field(None, description="Filter on application types")

"""
Errors raised while deploying Nginx. All of them are fatal to the CLI.
"""


class DeployError(Exception):
    """Base error; ``stage`` names the step that failed."""

    stage = "deploy"


class MissingKubeconfigError(DeployError):
    stage = "flags"

    def __init__(self, message: str = "kubeconfig cannot be empty"):
        super().__init__(message)


class InvalidScaleError(DeployError):
    stage = "flags"

    def __init__(self, scale: int):
        self.scale = scale
        super().__init__("scale must be greater than zero")


class MissingVersionError(DeployError):
    stage = "flags"

    def __init__(self, message: str = "version is required"):
        super().__init__(message)


class SettingsError(DeployError):
    """Environment or .env holds an invalid setting."""

    stage = "settings"


class ClientInitError(DeployError):
    """The API client could not be built from a loaded kubeconfig."""

    stage = "client"


class KubeconfigLoadError(ClientInitError):
    """The kubeconfig file could not be read, parsed or authenticated."""

    stage = "kubeconfig"


class DeploymentCreationError(DeployError):
    """The create request was rejected or never reached the API server."""

    stage = "deploy"

    def __init__(self, cause: BaseException):
        self.cause = cause
        # ApiException renders over several lines
        detail = " ".join(str(cause).split())
        super().__init__(f"failed to create deployment: {detail}")

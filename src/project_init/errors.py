# errors.py


class ProvisionError(Exception):
    """Base class for provisioning errors."""

    pass


# ----- Control Classification -----


class FatalProvisionError(ProvisionError):
    """Errors that should stop the run immediately."""

    pass


# ----- Precondition Errors -----


class MissingToolError(FatalProvisionError):
    def __init__(self, tool: str, install_url: str | None = None) -> None:
        self.tool = tool
        self.install_url = install_url
        message = f"{tool.upper()} is not installed."
        if install_url:
            message += f" Please install {tool.upper()} first: {install_url}"
        super().__init__(message)


class TemplateNotFoundError(FatalProvisionError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Bundled template not found: {path}")


# ----- Command Errors -----


class CommandFailedError(FatalProvisionError):
    def __init__(self, command: list[str], returncode: int, output: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        super().__init__(f"Command '{' '.join(command)}' failed with exit code {returncode}.")

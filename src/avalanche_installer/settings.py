from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AVALANCHE_INSTALLER_", env_file=".env", extra="ignore")

    tool_name: str = Field(default="avalanche")
    display_name: str = Field(default="Avalanche CLI")
    install_script_url: str = Field(
        default="https://raw.githubusercontent.com/ava-labs/avalanche-cli/main/scripts/install.sh"
    )
    repository_url: str = Field(default="https://github.com/ava-labs/avalanche-cli")

    bin_dir_name: str = Field(default="bin")
    default_shell: str = Field(default="bash")

    # logging
    log_level: str = "INFO"            # DEBUG|INFO|WARNING|ERROR
    log_file: str | None = None        # e.g., avalanche-installer.log
    log_console: bool = True

    @property
    def install_command(self) -> str:
        return f"curl -sSfL {self.install_script_url} | sh -s"

settings = Settings()

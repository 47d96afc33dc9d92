from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from constants.governance_constants import (
    CORE_VOTING_QUORUM,
    GSC_QUORUM,
    IMPERSONATED_BALANCE_WEI,
    LAST_CALL_OFFSET_SECONDS,
)

ALCHEMY_MAINNET_URL = "https://eth-mainnet.g.alchemy.com/v2/"


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    name: str = Field("Element Governance Fork Tests", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class ForkSettings(BaseSettings):
    """Settings for the local forking node (Hardhat or Anvil) and its upstream archive node."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    rpc_url: str = Field(
        default="http://127.0.0.1:8545",
        validation_alias="FORK_RPC_URL",
        description="JSON-RPC URL of the local node that forks mainnet",
    )
    alchemy_api_key: Optional[str] = Field(
        default=None,
        validation_alias="ALCHEMY_MAINNET_API_KEY",
        description="API key of the upstream mainnet archive node",
    )
    block_number: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias="FORK_BLOCK_NUMBER",
        description="Pin the fork to this block. Latest block when unset.",
    )
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=120, gt=0, validation_alias="RPC_TIMEOUT")
    # How long to wait for a receipt before treating it as missing (seconds)
    receipt_timeout: int = Field(default=120, gt=0, validation_alias="RECEIPT_TIMEOUT")

    @property
    def mainnet_fork_url(self) -> Optional[str]:
        if not self.alchemy_api_key:
            return None
        return f"{ALCHEMY_MAINNET_URL}{self.alchemy_api_key}"


class GovernanceSettings(BaseSettings):
    """Expected on-chain values and accounts used by the proposal scenarios."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    core_voting_quorum: int = Field(default=CORE_VOTING_QUORUM, gt=0, validation_alias="CORE_VOTING_QUORUM")
    gsc_quorum: int = Field(default=GSC_QUORUM, gt=0, validation_alias="GSC_QUORUM")
    gsc_members: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        validation_alias="GSC_MEMBERS",
        description="Comma-separated GSC member addresses. Discovered from MembershipProved events when empty.",
    )
    gsc_discovery_from_block: int = Field(default=0, ge=0, validation_alias="GSC_DISCOVERY_FROM_BLOCK")
    impersonated_balance_wei: int = Field(
        default=IMPERSONATED_BALANCE_WEI, ge=0, validation_alias="IMPERSONATED_BALANCE_WEI"
    )
    last_call_offset_seconds: int = Field(
        default=LAST_CALL_OFFSET_SECONDS, gt=0, validation_alias="LAST_CALL_OFFSET_SECONDS"
    )

    @field_validator("gsc_members", mode="before")
    @classmethod
    def _split_members(cls, value):
        if isinstance(value, str):
            return [member.strip() for member in value.split(",") if member.strip()]
        return value


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each section reads its own flat env vars through validation_alias.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    fork: ForkSettings = Field(default_factory=ForkSettings)
    governance: GovernanceSettings = Field(default_factory=GovernanceSettings)

    # Config to load from .env file
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )


# Singleton instance
settings = Settings()

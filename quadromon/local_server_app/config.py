from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

from quadromon.transports.hid.transport import AQUACOMPUTER_VENDOR_ID, QUADRO_PRODUCT_ID, QUADRO_REPORT_SIZE


class MonitorSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10281, validation_alias="SERVER_PORT")

    vendor_id: int = Field(AQUACOMPUTER_VENDOR_ID, validation_alias="QUADRO_VENDOR_ID")
    product_id: int = Field(QUADRO_PRODUCT_ID, validation_alias="QUADRO_PRODUCT_ID")
    device_path: Optional[str] = Field(None, validation_alias="QUADRO_DEVICE_PATH")
    report_size: int = Field(QUADRO_REPORT_SIZE, validation_alias="QUADRO_REPORT_SIZE")
    read_timeout_ms: int = Field(1000, validation_alias="QUADRO_READ_TIMEOUT_MS")

    poll_interval: float = Field(1.0, validation_alias="POLL_INTERVAL")
    enable_poll_job: bool = Field(True, validation_alias="ENABLE_POLL_JOB")
    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")

    # Serve captured reports instead of opening the USB device
    replay_file: Optional[str] = Field(None, validation_alias="REPLAY_FILE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> MonitorSettings:
    return MonitorSettings()

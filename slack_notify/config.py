from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # SLACK_* names are read when the PLUGIN_ variable is unset
    webhook: str = Field("", validation_alias=AliasChoices("PLUGIN_WEBHOOK", "SLACK_WEBHOOK"))
    channel: str = Field("", validation_alias=AliasChoices("PLUGIN_CHANNEL", "SLACK_CHANNEL"))
    recipient: str = ""
    username: str = ""

    # Message templates
    template: str = ""
    template_file: str = ""
    fallback: str = ""

    # Appearance
    image_url: str = ""
    icon_url: str = ""
    icon_emoji: str = ""
    color: str = ""

    # HTTP send timeout (seconds)
    timeout: float = 15
    debug: bool = False

    model_config = {
        "env_prefix": "PLUGIN_",
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }

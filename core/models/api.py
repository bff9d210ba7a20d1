from pydantic import BaseModel, ConfigDict, Field

from core.types import DeviceId

# Coordinates travel as integers scaled by this factor
COORDINATE_SCALE = 1_000_000


class Location(BaseModel):
    longitude: int
    latitude: int
    timestamp: int
    name: str | None = None
    color: str | None = None

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, timestamp: int) -> "Location":
        return cls(
            latitude=round(latitude * COORDINATE_SCALE),
            longitude=round(longitude * COORDINATE_SCALE),
            timestamp=timestamp,
        )

    @property
    def coordinate(self) -> tuple[float, float]:
        """(latitude, longitude) in degrees."""
        return (self.latitude / COORDINATE_SCALE, self.longitude / COORDINATE_SCALE)


class ChatMessage(BaseModel):
    message: str
    timestamp: int


class SendMessage(BaseModel):
    text: str
    timestamp: int
    identifier: str


class ApiResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    locations: dict[DeviceId, Location] = Field(default_factory=dict)
    chat_messages: dict[str, ChatMessage] = Field(default_factory=dict, alias="chatMessages")


class LocationPayload(BaseModel):
    device: DeviceId
    location: Location | None = None
    messages: list[SendMessage] = Field(default_factory=list)

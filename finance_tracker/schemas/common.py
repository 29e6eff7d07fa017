from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# JSON amounts go out as numbers, matching what the backend sends and expects.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Backend ids are placed in URL paths, so only plain path-safe characters are allowed.
RESOURCE_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

"""Holiday calendar HTTP client"""

import httpx
from datetime import date
from typing import Set
from statement_gateway.domain.exceptions import HolidayAPIError
from statement_gateway.config import settings


class HolidayClient:
    """Client for the shared holiday calendar API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.holiday_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_holidays(self) -> Set[str]:
        """
        Fetch every registered holiday as ISO date strings.

        Expected payload: {"success": true, "data": [{"date": "YYYY-MM-DD", ...}]}

        Raises:
            HolidayAPIError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/holidays")
                response.raise_for_status()
                data = response.json()

                # Normalize through date parsing so malformed entries fail here
                return {
                    date.fromisoformat(item["date"]).isoformat()
                    for item in data.get("data", [])
                }

            except httpx.TimeoutException as e:
                raise HolidayAPIError(f"Holiday API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise HolidayAPIError(f"Holiday API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise HolidayAPIError(f"Holiday API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise HolidayAPIError(f"Invalid holiday data: {e}") from e

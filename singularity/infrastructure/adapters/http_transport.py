import httpx
import structlog

from ...domain.ports import InvocationResult, Transport, TransportMode

logger = structlog.get_logger()


class HttpTransport(Transport):
    """Forwards events to a locally running gateway over HTTP."""

    def __init__(self, url: str) -> None:
        self._url = url

    @property
    def mode(self) -> TransportMode:
        return TransportMode.LOCAL

    @property
    def url(self) -> str:
        return self._url

    async def invoke(self, event: dict) -> InvocationResult:
        """POST the event as JSON to the local gateway."""
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.post(self._url, json=event)
                response.raise_for_status()

                logger.info(
                    "Local gateway responded",
                    url=self._url,
                    status_code=response.status_code,
                )

                return InvocationResult(
                    success=True,
                    payload=response.content,
                    status_code=response.status_code,
                )

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error("Local gateway returned error", url=self._url, status_code=status_code)
            return InvocationResult(success=False, error=e, status_code=status_code)

        except Exception as e:
            logger.error("Local gateway request failed", url=self._url, error=str(e))
            return InvocationResult(success=False, error=e)

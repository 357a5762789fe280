import requests  # type: ignore

from ..config.FetchConfig import FetchConfig
from .FetchError import FetchError


def _download(url: str, config: FetchConfig) -> requests.Response:
    """GET ``url`` following redirects; non-2xx and transport errors raise FetchError."""
    try:
        response = requests.get(
            url,
            timeout=config.timeout_secs,
            headers={"User-Agent": config.user_agent},
            allow_redirects=True,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc
    return response

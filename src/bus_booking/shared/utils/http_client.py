import os
from typing import Optional

import httpx

DEFAULT_API_URL = "https://bus-booking-backend.onrender.com/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


def create_http_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """予約バックエンド API 用の AsyncClient を生成する

    引数が省略された場合は環境変数
    BUS_BOOKING_API_URL / BUS_BOOKING_HTTP_TIMEOUT を参照する。
    """
    resolved_url = base_url or os.getenv("BUS_BOOKING_API_URL", DEFAULT_API_URL)
    resolved_timeout = timeout or float(
        os.getenv("BUS_BOOKING_HTTP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
    )
    return httpx.AsyncClient(
        base_url=resolved_url,
        headers={"Content-Type": "application/json"},
        timeout=resolved_timeout,
        transport=transport,
    )


def bearer(auth_token: str) -> dict[str, str]:
    """Authorization ヘッダを生成する"""
    return {"Authorization": f"Bearer {auth_token}"}


def error_message(response: httpx.Response) -> Optional[str]:
    """エラーレスポンス本文から message を取り出す（取れなければ None）"""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None

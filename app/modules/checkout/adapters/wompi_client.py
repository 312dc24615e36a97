# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/adapters/wompi_client.py

Cliente HTTP (httpx async) de la API de Wompi; implementa PaymentGateway.

- URL base resuelta desde WompiSettings (alias de entorno o WOMPI_BASE_URL).
- Llave pública para tokenización y pagos one-shot; llave privada en el resto.
- Resuelve el placeholder del acceptance_token contra /merchants/{public_key}
  (con /acceptance como alternativa si Wompi responde 422).
- Completa redirect_url con la página de resultado del frontend.
- Si el cluster configurado responde 404 o no es alcanzable, reintenta una
  vez en el cluster alterno (.co.uat. <-> .uat.).
- Errores HTTP/red se convierten en WompiGatewayError etiquetado.

El cliente singleton mantiene conexiones keep-alive; se cierra en el
lifespan con close_wompi_client().

Autor: HatsuSound
Fecha: 07/09/2026
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Any, Mapping, Optional

import httpx

from app.core.logging import mask_secret
from app.shared.config.settings_wompi import WompiSettings, get_wompi_settings
from app.modules.checkout.ports import ACCEPTANCE_TOKEN_PLACEHOLDER, PaymentGateway
from .gateway_errors import (
    GatewayErrorCategory,
    WompiGatewayError,
    error_from_response,
    error_from_transport,
)

logger = logging.getLogger(__name__)

# Límites de conexión del cliente HTTP singleton
WOMPI_HTTP_LIMITS = httpx.Limits(
    max_keepalive_connections=20,
    max_connections=50,
    keepalive_expiry=30.0,
)

DEFAULT_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


def alternate_cluster_url(url: str) -> str:
    """Devuelve la URL del cluster alterno de UAT o la misma URL si no aplica."""
    if ".co.uat." in url:
        return url.replace(".co.uat.", ".uat.")
    if ".uat." in url:
        return url.replace(".uat.", ".co.uat.")
    return url


class WompiClient(PaymentGateway):
    def __init__(
        self,
        settings: WompiSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_wompi_settings()
        self.base_url = self.settings.api_base_url
        self._transport = transport
        self._http = self._build_http(self.base_url)

    def _build_http(self, base_url: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url,
            headers=DEFAULT_HEADERS,
            timeout=httpx.Timeout(self.settings.timeout_seconds),
            limits=WOMPI_HTTP_LIMITS,
            transport=self._transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _auth_headers(self, use_private: bool) -> dict[str, str]:
        key = self.settings.wompi_private_key if use_private else self.settings.wompi_public_key
        if not key:
            raise WompiGatewayError(
                f"Falta {'PRIVATE' if use_private else 'PUBLIC'} KEY de Wompi",
                category=GatewayErrorCategory.AUTH,
            )
        return {"Authorization": f"Bearer {key}"}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        http: httpx.AsyncClient | None = None,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> dict[str, Any]:
        client = http or self._http
        logger.info("HTTP %s %s%s", method, client.base_url, path)
        try:
            response = await client.request(method, path, headers=headers, json=json)
        except httpx.RequestError as e:
            raise error_from_transport(e, operation=operation) from e

        if response.is_error:
            raise error_from_response(response, operation=operation)

        logger.info("HTTP %s %s", response.status_code, path)
        return response.json()

    def _ensure_redirect_url(self, body: dict[str, Any]) -> None:
        if not body.get("redirect_url"):
            body["redirect_url"] = self.settings.default_redirect_url
            logger.info("redirect_url no estaba presente: usando %s", body["redirect_url"])

    # ------------------------------------------------------------------
    # Acceptance token / merchant
    # ------------------------------------------------------------------
    async def get_merchant_info(self) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/merchants/{self.settings.wompi_public_key}",
            operation="get_merchant",
        )

    async def get_acceptance_token(self) -> str:
        try:
            data = await self.get_merchant_info()
        except WompiGatewayError as e:
            if e.status_code != 422:
                raise
            logger.warning("Public key no es un merchant ID válido, intentando /acceptance")
            data = await self._request("GET", "/acceptance", operation="get_acceptance")

        token = ((data.get("data") or {}).get("presigned_acceptance") or {}).get("acceptance_token")
        if not token:
            raise WompiGatewayError(
                "Wompi no devolvió presigned_acceptance.acceptance_token",
                category=GatewayErrorCategory.OTHER,
            )
        return token

    async def validate_configuration(self) -> bool:
        """Verifica merchant y acceptance token; nunca lanza."""
        try:
            await self.get_acceptance_token()
        except WompiGatewayError as e:
            logger.error("Configuración de Wompi inválida: %s", e)
            return False
        return True

    def get_configuration_info(self) -> dict[str, Any]:
        """Configuración efectiva con llaves enmascaradas."""
        return {
            "environment": self.settings.wompi_environment,
            "baseUrl": self.base_url,
            "publicKey": mask_secret(self.settings.wompi_public_key),
            "privateKey": mask_secret(self.settings.wompi_private_key),
            "eventsKey": mask_secret(self.settings.wompi_events_key),
            "integrityKey": mask_secret(self.settings.wompi_integrity_key),
            "frontendUrl": self.settings.frontend_url,
        }

    def log_configuration(self) -> None:
        info = self.get_configuration_info()
        logger.info(
            "WOMPI env=%s base_url=%s public=%s private=%s events=%s integrity=%s frontend=%s",
            info["environment"], info["baseUrl"], info["publicKey"], info["privateKey"],
            info["eventsKey"], info["integrityKey"], info["frontendUrl"],
        )

    # ------------------------------------------------------------------
    # PaymentGateway
    # ------------------------------------------------------------------
    async def create_transaction(self, request: Mapping[str, Any]) -> dict[str, Any]:
        body = dict(request)
        is_one_shot = bool(body.get("payment_method")) and not body.get("payment_source_id")

        if is_one_shot:
            self._ensure_redirect_url(body)
            provided = body.get("acceptance_token")
            if not provided or provided == ACCEPTANCE_TOKEN_PLACEHOLDER:
                body["acceptance_token"] = await self.get_acceptance_token()

        headers = self._auth_headers(use_private=not is_one_shot)

        try:
            data = await self._request(
                "POST", "/transactions", operation="create_transaction", headers=headers, json=body
            )
        except WompiGatewayError as e:
            unreachable = e.status_code is None and e.category is GatewayErrorCategory.OTHER
            if e.status_code != 404 and not unreachable:
                raise
            data = await self._create_on_alternate_cluster(body, headers, original=e)

        logger.info("Transacción creada en Wompi: %s", (data.get("data") or {}).get("id"))
        return data

    async def _create_on_alternate_cluster(
        self,
        body: dict[str, Any],
        headers: Mapping[str, str],
        *,
        original: WompiGatewayError,
    ) -> dict[str, Any]:
        alt_url = alternate_cluster_url(self.base_url)
        if alt_url == self.base_url:
            raise original

        logger.warning(
            "%s en %s. Reintentando en cluster alterno: %s",
            original.status_code or "NETWORK", self.base_url, alt_url,
        )
        async with self._build_http(alt_url) as alt_http:
            try:
                data = await self._request(
                    "POST",
                    "/transactions",
                    operation="create_transaction",
                    http=alt_http,
                    headers=headers,
                    json=body,
                )
            except WompiGatewayError as e:
                logger.error("También falló en cluster alterno: %s", e.status_code or "NETWORK")
                raise original from e

        logger.warning("Sugerencia: fija WOMPI_BASE_URL=%s", alt_url)
        return data

    async def get_transaction(self, transaction_id: str) -> dict[str, Any]:
        return await self._request(
            "GET", f"/transactions/{transaction_id}", operation="get_transaction"
        )

    async def verify_signature(self, payload: str, checksum: str) -> bool:
        key = self.settings.wompi_integrity_key
        if not key:
            logger.warning("No hay integrity key configurada, saltando verificación de firma")
            return True

        if not isinstance(checksum, str) or not checksum.isascii():
            return False

        expected = hmac.new(key.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()
        ok = hmac.compare_digest(expected, checksum.lower())
        logger.info("Verificación de firma: %s", "válida" if ok else "inválida")
        return ok

    def get_checkout_url(self, transaction_id: str) -> str:
        base = self.settings.checkout_base_url.rstrip("/")
        return f"{base}/p/{self.settings.wompi_public_key}?transaction_id={transaction_id}"

    async def create_payment_method_token(self, card_data: Mapping[str, Any]) -> str:
        body = {
            "number": card_data.get("number"),
            "cvc": card_data.get("cvc"),
            "exp_month": card_data.get("exp_month"),
            "exp_year": card_data.get("exp_year"),
            "card_holder": card_data.get("card_holder_name"),
        }
        data = await self._request(
            "POST",
            "/tokens/cards",
            operation="create_card_token",
            headers=self._auth_headers(use_private=False),
            json=body,
        )
        token: Optional[str] = (data.get("data") or {}).get("id")
        if not token:
            raise WompiGatewayError(
                "Wompi no devolvió ID del token",
                category=GatewayErrorCategory.OTHER,
            )
        logger.info("Token de método de pago creado: %s…", token[:12])
        return token


# =============================================================================
# SINGLETON
# =============================================================================

_wompi_client: Optional[WompiClient] = None


def get_wompi_client() -> WompiClient:
    """Cliente Wompi compartido por el proceso (keep-alive)."""
    global _wompi_client
    if _wompi_client is None:
        _wompi_client = WompiClient()
        _wompi_client.log_configuration()
    return _wompi_client


async def close_wompi_client() -> None:
    """Cierra el cliente singleton; registrar en el lifespan de FastAPI."""
    global _wompi_client
    if _wompi_client is not None:
        await _wompi_client.aclose()
        _wompi_client = None


__all__ = [
    "WompiClient",
    "WOMPI_HTTP_LIMITS",
    "alternate_cluster_url",
    "get_wompi_client",
    "close_wompi_client",
]

# Fin del archivo backend/app/modules/checkout/adapters/wompi_client.py

"""
EmailJS Module - Outbound calls to the EmailJS transactional-email API
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests


class EmailDeliveryError(Exception):
    """Raised when the provider could not be reached or rejected the send"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class EmailJSConfig:
    service_id: str
    template_id: str
    public_key: str
    api_url: str = 'https://api.emailjs.com/api/v1.0/email/send'
    timeout: Optional[float] = None

    @classmethod
    def from_app_config(cls, app_config: Mapping[str, Any]) -> 'EmailJSConfig':
        """Build from a Flask config mapping"""
        return cls(
            service_id=app_config['EMAILJS_SERVICE_ID'],
            template_id=app_config['EMAILJS_TEMPLATE_ID'],
            public_key=app_config['EMAILJS_PUBLIC_KEY'],
            api_url=app_config.get('EMAILJS_API_URL', cls.api_url),
            timeout=app_config.get('EMAILJS_TIMEOUT'),
        )


def build_payload(config: EmailJSConfig, template_params: Dict[str, str]) -> Dict[str, Any]:
    """
    Build the JSON body expected by the EmailJS send endpoint

    Args:
        config: Provider identifiers
        template_params: Values substituted into the email template

    Returns:
        dict: Request body
    """
    return {
        'service_id': config.service_id,
        'template_id': config.template_id,
        'user_id': config.public_key,
        'template_params': dict(template_params),
    }


class EmailJSClient:
    """Sends one email per call through the EmailJS REST API"""

    def __init__(self, config: EmailJSConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._http = session or requests

    def send(self, template_params: Dict[str, str]) -> None:
        payload = build_payload(self.config, template_params)
        try:
            response = self._http.post(self.config.api_url, json=payload, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise EmailDeliveryError(f"EmailJS request failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            raise EmailDeliveryError(
                f"EmailJS rejected the send: {response.status_code}",
                status_code=response.status_code)

    __call__ = send

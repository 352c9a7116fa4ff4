"""HTTP client for communicating with the Registry service."""

import os
import time
import uuid
from typing import Optional

import httpx

from common.logging_config import get_logger
from cli.config import Config
from cli.constants import GREEN, RED, RESET
from cli.utils import format_file_size, format_timestamp, normalize_address, shorten_address

logger = get_logger(__name__)


class RegistryClient:
    """HTTP client for the Registry API with retry logic and error handling."""

    def __init__(self, config: Config):
        """
        Initialize registry client.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.session = httpx.Client(
            base_url=config.get_base_url(),
            timeout=config.get_timeout()
        )
        self.request_id = None
        logger.info(f"Initialized RegistryClient [base_url={config.get_base_url()}]")

    def _request_with_retry(
        self,
        method: str,
        endpoint: str,
        max_retries: Optional[int] = None,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request with retry logic on 5xx errors and network failures.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint path
            max_retries: Max retry attempts (uses config default if None)
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            HTTP response object

        Raises:
            ConnectionError: If max retries exceeded or connection fails
        """
        retry_config = self.config.get_retry_config()
        max_retries = max_retries if max_retries is not None else retry_config['max_retries']
        backoff = retry_config['retry_backoff_multiplier']

        last_exception = None

        self.request_id = str(uuid.uuid4())
        kwargs.setdefault('headers', {})
        kwargs['headers']['X-Request-ID'] = self.request_id

        logger.debug(f"Making request: {method} {endpoint} [request_id={self.request_id}]")

        for attempt in range(max_retries + 1):
            try:
                response = self.session.request(method, endpoint, **kwargs)

                logger.debug(
                    f"Response received: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
                )

                if 400 <= response.status_code < 500:
                    logger.warning(
                        f"Client error: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
                    )
                    return response

                if response.status_code >= 500 and attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Server error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} status={response.status_code}, retrying in {delay}s [request_id={self.request_id}]"
                    )
                    time.sleep(delay)
                    continue

                return response

            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                if attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Network error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} error={type(e).__name__}, retrying in {delay}s [request_id={self.request_id}]"
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"Network error (max retries exceeded): {method} {endpoint} error={e} [request_id={self.request_id}]"
                    )

        if isinstance(last_exception, httpx.TimeoutException):
            raise ConnectionError("Request timed out. Server may be overloaded.")
        raise ConnectionError("Cannot connect to registry server. Is it running?")

    def _format_error(self, response: httpx.Response) -> str:
        """
        Map HTTP errors to user-friendly messages.

        Args:
            response: HTTP response object

        Returns:
            User-friendly error message
        """
        try:
            error_data = response.json()
            detail = error_data.get('detail', 'Unknown error')
            code = error_data.get('code', 'UNKNOWN')
        except ValueError:
            detail = response.text if response.text else 'Unknown error'
            code = 'UNKNOWN'

        error_messages = {
            'REGISTRY_PAUSED': 'Registrations are paused by the operator. Try again later.',
            'UNAUTHORIZED_OPERATOR': 'Only the registry operator can do this.',
            'ALREADY_REGISTERED': 'This identifier is already registered.',
            'ORDINAL_OUT_OF_RANGE': 'No record at that index.',
            'ARITHMETIC_OVERFLOW': 'Registry counter overflow.',
        }

        if code in error_messages:
            return error_messages[code]

        if code == 'INVALID_INPUT':
            return f"Invalid input: {detail}"

        status_messages = {
            400: 'Bad request',
            401: 'Caller address missing or malformed. Run: identity <address>',
            403: 'Access forbidden',
            404: 'Not found',
            422: 'Request rejected by server validation',
            500: 'Server error',
            503: 'Service unavailable',
        }

        message = status_messages.get(response.status_code, detail)
        return f"{message} (Code: {code})" if code != 'UNKNOWN' else message

    def _get_caller_header(self) -> dict:
        """
        Get caller identity header.

        Raises:
            ValueError: If no caller address is configured
        """
        address = self.config.get_caller_address()
        if not address:
            raise ValueError("No caller address set. Please run: identity <address>")
        return {'X-Caller-Address': address}

    def _format_record(self, record: dict) -> str:
        size = record['size']
        return "\n".join([
            f"Identifier: {record['identifier']}",
            f"Name:       {record['name']}",
            f"Size:       {format_file_size(size)} ({size} bytes)",
            f"Uploader:   {record['uploader']}",
            f"Block:      {record['block_height']}",
            f"Timestamp:  {format_timestamp(record['timestamp'])}",
        ])

    def set_identity(self, address: Optional[str]) -> str:
        """
        Show or set the caller address.

        Args:
            address: New address, or None to show the current one
        """
        if address is None:
            current = self.config.get_caller_address()
            return f"Caller address: {current}" if current else "No caller address set."

        try:
            normalized = normalize_address(address)
        except ValueError as e:
            return f"Error: {e}"

        self.config.set_caller_address(normalized)
        logger.info(f"Caller address set to {normalized}")
        return f"Caller address set to {normalized}"

    def register_file(self, identifier: str, name: str, size: int) -> str:
        """
        Register a content identifier with a name and size.

        Returns:
            Success or error message
        """
        logger.info(f"Registering identifier: {identifier} name={name} size={size}")
        try:
            headers = self._get_caller_header()
        except ValueError as e:
            return f"Error: {e}"

        try:
            response = self._request_with_retry(
                'POST',
                '/files',
                json={'identifier': identifier, 'name': name, 'size': size},
                headers=headers
            )

            if response.status_code == 201:
                logger.info(f"Registration successful for identifier: {identifier}")
                return f"{GREEN}Registered{RESET} {identifier} as {name} ({format_file_size(size)})"

            logger.warning(f"Registration failed for identifier: {identifier} status={response.status_code}")
            return f"Registration failed: {self._format_error(response)}"

        except ConnectionError as e:
            logger.error(f"Connection error during registration: {e}")
            return f"Error: {e}"

    def add_file(self, identifier: str, file_path: str) -> str:
        """
        Register an identifier using a local file's base name and size.

        The file itself is not uploaded; pin it first and pass the identifier.
        """
        path = os.path.expanduser(file_path)
        if not os.path.exists(path):
            return f"Error: File not found: {file_path}"
        if not os.path.isfile(path):
            return f"Error: Not a file: {file_path}"

        size = os.path.getsize(path)
        if size == 0:
            return f"Error: File is empty: {file_path}"

        return self.register_file(identifier, os.path.basename(path), size)

    def verify(self, identifier: str) -> str:
        """
        Show the record registered for an identifier.
        """
        try:
            response = self._request_with_retry('GET', '/files/lookup', params={'identifier': identifier})
            if response.status_code != 200:
                return f"Verify failed: {self._format_error(response)}"

            record = response.json()
            if not record['exists']:
                return f"{RED}Not registered:{RESET} {identifier}"

            return f"{GREEN}Verified{RESET}\n{self._format_record(record)}"

        except ConnectionError as e:
            logger.error(f"Connection error during verify: {e}")
            return f"Error: {e}"

    def exists(self, identifier: str) -> str:
        try:
            response = self._request_with_retry('GET', '/files/exists', params={'identifier': identifier})
            if response.status_code != 200:
                return f"Exists check failed: {self._format_error(response)}"

            if response.json()['exists']:
                return f"{identifier}: registered"
            return f"{identifier}: not registered"

        except ConnectionError as e:
            logger.error(f"Connection error during exists check: {e}")
            return f"Error: {e}"

    def count(self) -> str:
        try:
            response = self._request_with_retry('GET', '/files/count')
            if response.status_code != 200:
                return f"Count failed: {self._format_error(response)}"
            return f"Registered files: {response.json()['count']}"

        except ConnectionError as e:
            logger.error(f"Connection error during count: {e}")
            return f"Error: {e}"

    def show(self, index: int) -> str:
        """
        Show the record at a registration index.
        """
        try:
            response = self._request_with_retry('GET', f'/files/index/{index}')
            if response.status_code != 200:
                return f"Show failed: {self._format_error(response)}"

            return f"#{index}\n{self._format_record(response.json())}"

        except ConnectionError as e:
            logger.error(f"Connection error during show: {e}")
            return f"Error: {e}"

    def browse(self, offset: int, limit: int) -> str:
        """
        List records in registration order as a table.
        """
        try:
            response = self._request_with_retry(
                'GET', '/files', params={'offset': offset, 'limit': limit}
            )
            if response.status_code != 200:
                return f"Browse failed: {self._format_error(response)}"

            data = response.json()
            files = data['files']
            total = data['total']

            if not files:
                return f"No files in range (total: {total})."

            lines = [f"Showing {offset}-{offset + len(files) - 1} of {total}:"]
            lines.append(f"{'#':>5}  {'Identifier':<46}  {'Name':<24}  {'Size':>10}  {'Block':>7}  Uploader")
            for position, record in enumerate(files, start=offset):
                lines.append(
                    f"{position:>5}  {record['identifier'][:46]:<46}  {record['name'][:24]:<24}  "
                    f"{format_file_size(record['size']):>10}  {record['block_height']:>7}  "
                    f"{shorten_address(record['uploader'])}"
                )
            return "\n".join(lines)

        except ConnectionError as e:
            logger.error(f"Connection error during browse: {e}")
            return f"Error: {e}"

    def events(self, after_id: int) -> str:
        try:
            response = self._request_with_retry('GET', '/events', params={'after_id': after_id})
            if response.status_code != 200:
                return f"Events failed: {self._format_error(response)}"

            events = response.json()['events']
            if not events:
                return "No new events."

            return "\n".join(
                f"[{event['event_id']}] {event['event_type']} size={event['size']} "
                f"uploader={shorten_address(event['uploader'])} block={event['block_height']}"
                for event in events
            )

        except ConnectionError as e:
            logger.error(f"Connection error during events: {e}")
            return f"Error: {e}"

    def set_paused(self, paused: bool) -> str:
        """
        Close or reopen registrations (operator only).
        """
        action = 'pause' if paused else 'unpause'
        try:
            headers = self._get_caller_header()
        except ValueError as e:
            return f"Error: {e}"

        try:
            response = self._request_with_retry(
                'POST', '/admin/pause', json={'paused': paused}, headers=headers
            )
            if response.status_code != 200:
                logger.warning(f"Failed to {action} registry status={response.status_code}")
                return f"Failed to {action}: {self._format_error(response)}"

            logger.info(f"Registry {action} succeeded")
            return "Registrations paused." if response.json()['paused'] else "Registrations open."

        except ConnectionError as e:
            logger.error(f"Connection error during {action}: {e}")
            return f"Error: {e}"

    def status(self) -> str:
        try:
            response = self._request_with_retry('GET', '/admin/paused')
            if response.status_code != 200:
                return f"Status failed: {self._format_error(response)}"
            return "Registrations paused." if response.json()['paused'] else "Registrations open."

        except ConnectionError as e:
            logger.error(f"Connection error during status: {e}")
            return f"Error: {e}"

    def close(self) -> None:
        self.session.close()

"""
Python module for sending iControl REST calls to a BIG-IP device.
"""

import json

import requests

from rest.common.utils.exceptions import (
    CommandExecutionError,
    HTTPError,
    ResourceNotFoundError,
)
from utility.log import Log

log = Log(__name__)


def rest(**kw):
    """
    Build a REST object from a device configuration.

    config = {"address": "10.12.34.23", "username": "admin", "password": "passwd", "port": 443}
    """
    device = kw.get("device", {})
    return REST(
        ip=device.get("address"),
        username=device.get("username", "admin"),
        password=device.get("password", "admin"),
        port=device.get("port", 443),
        verify=device.get("verify", False),
        timeout=device.get("timeout", 60),
    )


class REST(object):
    """REST class for invoking REST calls GET, POST, PUT, PATCH, DELETE."""

    # Constants representing REST API keys.
    HEADERS = "headers"
    DATA = "data"

    # Constants representing type of REST request
    GET = "get"
    PATCH = "patch"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    def __init__(self, **kwargs):
        """This class defines methods to invoke REST calls.

        Args:
          ip(str): IP address or hostname of the device.
          username(str, optional): Username to be used for authentication.
            Default: 'admin'.
          password(str, optional): Password to be used for authentication.
            Default: 'admin'.
          port(int,optional): Port to connect for sending REST calls. Default: 443.
          base_uri(str,optional): URI for sending REST calls to.
          verify(bool,optional): Verify the device certificate. Default: False.
          timeout(int,optional): Request timeout in seconds. Default: 60.

        Returns
          Returns REST object instance.
        """
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self._ip = kwargs.get("ip", None)
        if not self._ip:
            raise ValueError("Invalid IP address '%s'." % self._ip)

        self._username = kwargs.get("username", "admin")
        self._password = kwargs.get("password", "admin")
        self._port = kwargs.get("port", 443)
        self._verify = kwargs.get("verify", False)
        self._timeout = kwargs.get("timeout", 60)
        base_url = f"https://{self._ip}:{self._port}"
        self._base_uri = kwargs.get("base_uri", base_url)

        if not self._verify:
            # Disable HTTPS certificate warning.
            requests.packages.urllib3.disable_warnings()

    @property
    def base_uri(self):
        return self._base_uri

    def delete(self, relative_url, **kwargs):
        """This routine is used to invoke DELETE call for REST API.

        Args:
          relative_url(str): Relative URL for the particular API call.
          kwargs:
            headers(dict, optional): Custom headers for making the REST call.

        Returns:
          dict: decoded response body.
        """
        kwargs["operation"] = REST.DELETE
        return self.__perform_operation(relative_url, **kwargs)

    def get(self, relative_url, **kwargs):
        """This routine is used to invoke GET call for REST API.

        Args:
          relative_url: Relative URL for the particular API call.
          kwargs:
            headers(dict, optional): Custom headers for making the REST call.

        Returns:
          dict: decoded response body.
        """
        kwargs["operation"] = REST.GET
        return self.__perform_operation(relative_url, **kwargs)

    def patch(self, relative_url, **kwargs):
        """This routine is used to invoke PATCH call for REST API.

        Args:
          relative_url(str): Relative URL for the particular API call.
          kwargs:
            headers(dict, optional): Custom headers for making the REST call.
            data(dict, optional): Data to be send for making the REST call.

        Returns:
          dict: decoded response body.
        """
        kwargs["operation"] = REST.PATCH
        return self.__perform_operation(relative_url, **kwargs)

    def post(self, relative_url, **kwargs):
        """This routine is used to invoke POST call for REST API.

        Args:
          relative_url(str): Relative URL for the particular API call.
          kwargs:
            headers(dict, optional): Custom headers for making the REST call.
            data(dict, optional): Data to be send for making the REST call.

        Returns:
          dict: decoded response body.
        """
        kwargs["operation"] = REST.POST
        return self.__perform_operation(relative_url, **kwargs)

    def put(self, relative_url, **kwargs):
        """This routine is used to invoke PUT call for REST API.

        Args:
          relative_url(str): Relative URL for the particular API call.
          kwargs:
            headers(dict, optional): Custom headers for making the REST call.
            data(dict, optional): Data to be send for making the REST call.

        Returns:
          dict: decoded response body.
        """
        kwargs["operation"] = REST.PUT
        return self.__perform_operation(relative_url, **kwargs)

    def __perform_operation(self, relative_url, **kwargs):
        """
        Private Method which can be used to perform operations like post, get,
        patch, delete and put.

        Returns:
          dict: decoded response body.
        """
        custom_headers = kwargs.get(REST.HEADERS, self.headers)
        custom_data = kwargs.get(REST.DATA, None)
        main_uri = "".join([self._base_uri, relative_url])
        if "operation" not in kwargs:
            raise ValueError("Operation value not specified.")
        operation = kwargs.get("operation")

        # Encode(Serialize) the data using json.dumps
        data = json.dumps(custom_data) if custom_data is not None else None
        return self.__send_request(
            req_type=operation,
            main_uri=main_uri,
            headers=custom_headers,
            data=data,
        )

    def __send_request(self, **kwargs):
        """
        Private Method which sends a single HTTP request and maps the
        status code of the response.
        """
        req_type = kwargs.pop("req_type", None)
        if not req_type:
            raise ValueError("REST request type not specified.")

        main_uri = kwargs.pop("main_uri", None)
        if not main_uri:
            raise ValueError("REST request URL not specified.")

        headers = kwargs.pop("headers", {})
        data = kwargs.pop("data", None)

        log.info(f"REST call Details {req_type.upper()}: {main_uri}")
        log.debug(f">> {data}")
        method_to_call = getattr(requests, req_type)
        response = method_to_call(
            main_uri,
            headers=headers,
            auth=(self._username, self._password),
            verify=self._verify,
            data=data,
            timeout=self._timeout,
        )

        if response.status_code in (
            requests.codes.OKAY,
            requests.codes.CREATED,
            requests.codes.ACCEPTED,
            requests.codes.NO_CONTENT,
        ):
            if response.status_code == requests.codes.NO_CONTENT or not response.text:
                return {}
            # Decode(Deserialize) the json object using json.loads
            return_val = json.loads(response.text)
            log.debug(f"<< {json.dumps(return_val, indent=2)}")
            return return_val

        if response.status_code == requests.codes.NOT_FOUND:
            log.debug(f"NOT FOUND {main_uri}")
            raise ResourceNotFoundError(
                f"{response.status_code}: {main_uri} not found",
                response=response,
                status_code=response.status_code,
            )

        if response.status_code == requests.codes.UNAUTHORIZED:
            log.debug(
                f"UNAUTHORIZED ERROR({response.status_code}:{response.text}). Please check given credentials"
            )
            raise HTTPError(
                f"{response.status_code} Credentials rejected for user {self._username}",
                response=response,
                status_code=response.status_code,
            )

        if response.status_code in (
            requests.codes.BAD_REQUEST,
            requests.codes.CONFLICT,
            requests.codes.UNSUPPORTED_MEDIA_TYPE,
        ):
            message = f"[{response.status_code}:{response.text}]."
            log.debug(f"{req_type.upper()} {main_uri} rejected {message}")
            raise HTTPError(message, response=response, status_code=response.status_code)

        message = f"[{response.status_code}:{response.text}]."
        log.debug(f"RESTError: {req_type} response: {message}")
        raise CommandExecutionError(message)

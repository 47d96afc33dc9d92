# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified By: Cuong CT, 6/12/2025
# Change Description: Errors from the forking node are fatal. No retriable classification.

from typing import Any, Dict

from utils.exceptions import ForkNetworkError
from utils.logger_utils import get_logger

logger = get_logger(__name__)


def rpc_response_to_result(method: str, response: Dict[str, Any]) -> Any:
    """
    Extracts the result of a JSON-RPC response.
    Any error object raises ForkNetworkError; a few methods legitimately return null.
    """
    error = response.get("error")
    if error is not None:
        if isinstance(error, dict):
            raise ForkNetworkError(method, error.get("message", str(error)), error.get("code"))
        raise ForkNetworkError(method, str(error))

    if "result" not in response:
        raise ForkNetworkError(method, f"result is missing in response {response}")

    return response["result"]

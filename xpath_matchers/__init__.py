# Copyright 2015-2016 Internap.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

LOGGER_NAME = "xpath_matchers"

MATCHED = "matched"
NOT_MATCHED = "not-matched"


class XPathMatcherError(Exception):
    def __init__(self, msg, expression=None):
        super(XPathMatcherError, self).__init__(msg)
        self.expression = expression


class ParseFailed(XPathMatcherError):
    def __init__(self, reason, expression=None):
        super(ParseFailed, self).__init__("Could not parse XML source: {}".format(reason), expression)
        self.reason = reason


class EvaluationFailed(XPathMatcherError):
    def __init__(self, reason, expression=None):
        super(EvaluationFailed, self).__init__(
            "Could not evaluate XPath {}: {}".format(expression, reason), expression)
        self.reason = reason


class NotANodeSet(EvaluationFailed):
    def __init__(self, result, expression=None):
        super(NotANodeSet, self).__init__(
            "expected a node-set, got {} {!r}".format(type(result).__name__, result), expression)
        self.result = result


def validate_expression(expression):
    if not isinstance(expression, str) or not expression.strip():
        raise ValueError("XPath expression must be a non-empty string, got {!r}".format(expression))
    return expression


from xpath_matchers.has_xpath import HasXPathMatcher, has_xpath  # noqa: E402
from xpath_matchers.evaluate_xpath import EvaluateXPathMatcher, evaluates_xpath  # noqa: E402

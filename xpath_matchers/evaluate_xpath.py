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

import math

from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from lxml import etree

from xpath_matchers.base import BaseXPathMatcher


def evaluates_xpath(expression, value_matcher):
    """Matches XML whose XPath string value satisfies ``value_matcher``.

    A plain value is compared with ``equal_to``::

        assert_that(xml, evaluates_xpath("count(//fruit)", "3"))
        assert_that(xml, evaluates_xpath("//fruit[1]/@name", starts_with("app")))
    """
    return EvaluateXPathMatcher(expression, wrap_matcher(value_matcher))


class EvaluateXPathMatcher(BaseXPathMatcher):
    def __init__(self, expression, value_matcher, **kwargs):
        super(EvaluateXPathMatcher, self).__init__(expression, **kwargs)
        self.value_matcher = value_matcher
        self.last_evaluation = None

    def evaluate(self, source):
        return string_value(self.evaluate_raw(source))

    def _matches(self, item):
        value = self.evaluate(item)
        self.last_evaluation = (item, value)
        return self.value_matcher.matches(value)

    def value_of(self, item):
        if self.last_evaluation is not None and self.last_evaluation[0] is item:
            return self.last_evaluation[1]
        return self.evaluate(item)

    def describe_to(self, description):
        description.append_text("XML with XPath ").append_text(self.expression) \
            .append_text(" evaluated to ").append_description_of(self.value_matcher)

    def describe_mismatch(self, item, mismatch_description):
        value = self.value_of(item)
        mismatch_description.append_text("XPath evaluated to ").append_description_of(value).append_text(", ")
        self.value_matcher.describe_mismatch(value, mismatch_description)


def string_value(result):
    if isinstance(result, (list, tuple)):
        return node_string_value(result[0]) if result else ""
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, float):
        return number_string_value(result)
    return str(result)


def node_string_value(node):
    if etree.iselement(node):
        if not isinstance(node.tag, str):
            return node.text or ""
        return "".join(node.itertext())
    if isinstance(node, tuple):
        # namespace axis yields (prefix, uri)
        return node[1]
    return str(node)


def number_string_value(number):
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == int(number):
        return str(int(number))
    return repr(number)

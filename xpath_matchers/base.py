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

import logging

from hamcrest.core.base_matcher import BaseMatcher

from xpath_matchers import LOGGER_NAME, EvaluationFailed, ParseFailed, XPathMatcherError, validate_expression
from xpath_matchers.engines import DEFAULT_PARSER, DEFAULT_EVALUATOR
from xpath_matchers.sources import to_node, describe_error


class BaseXPathMatcher(BaseMatcher):
    def __init__(self, expression, namespaces=None, parser=None, evaluator=None, logger=None):
        self.expression = validate_expression(expression)
        self.namespaces = dict(namespaces) if namespaces else None
        self.parser = parser
        self.evaluator = evaluator
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def with_namespace_context(self, prefix2uri):
        self.namespaces = dict(prefix2uri) if prefix2uri else None
        return self

    def with_parser(self, parser):
        self.parser = parser
        return self

    def with_evaluator(self, evaluator):
        self.evaluator = evaluator
        return self

    def evaluate_raw(self, source):
        parser = DEFAULT_PARSER if self.parser is None else self.parser
        evaluator = DEFAULT_EVALUATOR if self.evaluator is None else self.evaluator

        try:
            node = to_node(source, parser, self.expression)
        except ParseFailed as e:
            self.logger.info("Parsing source for %s failed : %s" % (repr(self.expression), e.reason))
            raise

        self.logger.debug("Evaluating %s with namespaces %s" % (repr(self.expression), repr(self.namespaces)))
        try:
            result = evaluator.evaluate(self.expression, node, self.namespaces)
        except XPathMatcherError:
            raise
        except Exception as e:
            self.logger.info("Evaluating %s failed : %s" % (repr(self.expression), describe_error(e)))
            raise EvaluationFailed(describe_error(e), self.expression) from e

        self.logger.debug("%s returned %s" % (repr(self.expression), repr(result)))
        return result

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

from xpath_matchers import MATCHED, NOT_MATCHED, NotANodeSet
from xpath_matchers.base import BaseXPathMatcher


def has_xpath(expression):
    """Matches XML in which ``expression`` selects at least one node.

    The XML can be text, bytes, a file-like object or an lxml node::

        assert_that("<a><b/></a>", has_xpath("//a/b"))
        assert_that(root, has_xpath("//atom:entry").with_namespace_context({"atom": ATOM}))

    Parse and evaluation errors are raised, even under ``not_``.
    """
    return HasXPathMatcher(expression)


class HasXPathMatcher(BaseXPathMatcher):
    def check(self, source):
        result = self.evaluate_raw(source)
        if not isinstance(result, (list, tuple)):
            raise NotANodeSet(result, self.expression)

        return MATCHED if len(result) > 0 else NOT_MATCHED

    def _matches(self, item):
        return self.check(item) == MATCHED

    def describe_to(self, description):
        description.append_text("XML with XPath ").append_text(self.expression)

    def describe_mismatch(self, item, mismatch_description):
        mismatch_description.append_text("XPath returned no results.")

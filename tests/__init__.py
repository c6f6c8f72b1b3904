# Copyright 2015 Internap.
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

import re

from hamcrest.library.text.substringmatcher import SubstringMatcher
from lxml import etree

NS_ATOM = "http://www.w3.org/2005/Atom"

FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed>
   <title>title</title>
   <entry>
       <title>title1</title>
       <id>id1</id>
   </entry>
</feed>"""

FEED_WITH_TWO_ENTRIES = """<?xml version="1.0" encoding="UTF-8"?>
<feed>
   <title>title</title>
   <entry>
       <title>title1</title>
       <id>id1</id>
   </entry>
   <entry>
       <title>title2</title>
       <id>id2</id>
   </entry>
</feed>"""

ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
   <title>title</title>
   <entry>
       <title>title1</title>
       <id>id1</id>
   </entry>
</feed>"""

FRUITS = """<?xml version="1.0" encoding="UTF-8"?>
<fruits>
    <fruit name="apple"/>
    <fruit name="orange"/>
    <fruit name="banana"/>
</fruits>"""


def root_of(xml):
    return etree.fromstring(xml.encode())


class RegexStringContains(SubstringMatcher):

    def __init__(self, regex_substring):
        super(RegexStringContains, self).__init__(regex_substring)

    def _matches(self, item):
        return re.search(self.substring, item) is not None

    def relationship(self):
        return 'containing regex'


def contains_regex(substring):
    """Matches if object is a string containing a given string.

    :param substring: The regex string to search for.
    """
    return RegexStringContains(substring)

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

import re

from lxml import etree

XML_DECLARED_ENCODING = re.compile(r"""^\s*<\?xml[^>]*?\sencoding=['"]([A-Za-z][A-Za-z0-9._-]*)['"]""")

DEFAULT_PARSER_OPTIONS = {
    "resolve_entities": False,
    "no_network": True,
}


class LxmlParser(object):
    """Turns XML text into an lxml document.

    Keyword options are handed to ``lxml.etree.XMLParser``; a new parser is
    built for every document so instances can be shared.
    """

    def __init__(self, **options):
        self.options = dict(DEFAULT_PARSER_OPTIONS, **options)

    def new_parser(self):
        return etree.XMLParser(**self.options)

    def parse(self, source):
        parser = self.new_parser()
        if hasattr(source, "read"):
            return etree.parse(source, parser)
        if isinstance(source, str):
            source = source.encode(declared_encoding(source), "xmlcharrefreplace")
        return etree.fromstring(source, parser).getroottree()


class LxmlXPathEvaluator(object):
    def __init__(self, smart_strings=True):
        self.smart_strings = smart_strings

    def compile(self, expression, namespaces=None):
        return etree.XPath(expression, namespaces=namespaces, smart_strings=self.smart_strings)

    def evaluate(self, expression, node, namespaces=None):
        return self.compile(expression, namespaces)(node)


def declared_encoding(text):
    declaration = XML_DECLARED_ENCODING.match(text)
    return declaration.group(1) if declaration else "utf-8"


DEFAULT_PARSER = LxmlParser()
DEFAULT_EVALUATOR = LxmlXPathEvaluator()

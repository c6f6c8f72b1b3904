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

from lxml import etree

from xpath_matchers import ParseFailed, XPathMatcherError


def is_node(source):
    return etree.iselement(source) or isinstance(source, etree._ElementTree)


def is_text(source):
    return isinstance(source, (str, bytes)) or hasattr(source, "read")


def to_node(source, parser, expression=None):
    if is_node(source):
        return source

    if not is_text(source):
        raise TypeError("Cannot look up XPath in a {}".format(type(source).__name__))

    try:
        return parser.parse(source)
    except XPathMatcherError:
        raise
    except Exception as e:
        raise ParseFailed(describe_error(e), expression) from e


def describe_error(error):
    return str(error) or type(error).__name__

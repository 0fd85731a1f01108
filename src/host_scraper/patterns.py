"""
Regex fragments used to pull hostnames, URLs and IPv4 addresses out of raw page text.

Each fragment is a plain pattern string so it can be matched on its own and
combined into the compiled expressions at the bottom of the module.
"""

import re

# In a page we only care about names introduced by a quote or a slash
# (i.e. "www.site.com, 'site.com or http://site.com).
MARKER = r"[\"'/]"

# One or more dash-joined alphanumeric labels, each followed by a dot, then the
# candidate TLD letters (i.e. www.my-site.com).
HOSTNAME = r"(?:[a-zA-Z0-9]+(?:-[a-zA-Z0-9]+)*\.)+[a-zA-Z]+"

URL_CHARS = r"a-zA-Z0-9\-_&=.%?"

# Optional path of legal URL characters that must end in a file extension
# (i.e. /static/app.min.js). Kept free of nested repetition so a long path
# without an extension fails in linear time.
PATH_SUFFIX = rf"(?:/[{URL_CHARS}/]*)?\.[a-z]+"

# Options after the file (i.e. ?v=3411234)
QUERY_SUFFIX = rf"\?[{URL_CHARS}]*"

URL = rf"{MARKER}{HOSTNAME}(?:{PATH_SUFFIX}(?:{QUERY_SUFFIX})?)?"

IPV4_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4 = rf"{IPV4_OCTET}(?:\.{IPV4_OCTET}){{3}}"

TLD_SUFFIX = r"\.(?P<tld>[a-zA-Z]+(?:-[a-zA-Z]+)*)$"

# A script resource, with or without options
SCRIPT_SUFFIX = rf"\.js(?:{QUERY_SUFFIX})?$"


IPV4_RE = re.compile(IPV4)
HOSTNAME_RE = re.compile(MARKER + HOSTNAME)
URL_RE = re.compile(URL)
TLD_SUFFIX_RE = re.compile(TLD_SUFFIX)
SCRIPT_SUFFIX_RE = re.compile(SCRIPT_SUFFIX)


def is_marker(char: str) -> bool:
    return len(char) == 1 and re.fullmatch(MARKER, char) is not None

"""
Registry of valid top-level domains.

Hostname candidates found in page text are only kept when their trailing label
is a known TLD, which filters out dotted text such as ``jquery.min`` or
``window.location``.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Union

logger = logging.getLogger(__name__)


GENERIC_TLDS = """
aero arpa asia biz cat com coop edu gov info int jobs mil mobi museum name net
org post pro tel travel xxx
academy agency app art blog business cafe cloud club codes company consulting
design dev digital email expert finance global group guru host link live media
network news one online page photo photos press run services shop site social
software solutions space store studio systems team tech today tools top website
wiki work works world xyz zone
""".split()

COUNTRY_CODE_TLDS = """
ac ad ae af ag ai al am ao aq ar as at au aw ax az ba bb bd be bf bg bh bi bj
bm bn bo br bs bt bw by bz ca cc cd cf cg ch ci ck cl cm cn co cr cu cv cw cx
cy cz de dj dk dm do dz ec ee eg er es et eu fi fj fk fm fo fr ga gb gd ge gf
gg gh gi gl gm gn gp gq gr gs gt gu gw gy hk hm hn hr ht hu id ie il im in io
iq ir is it je jm jo jp ke kg kh ki km kn kp kr kw ky kz la lb lc li lk lr ls
lt lu lv ly ma mc md me mg mh mk ml mm mn mo mp mq mr ms mt mu mv mw mx my mz
na nc ne nf ng ni nl no np nr nu nz om pa pe pf pg ph pk pl pm pn pr ps pt pw
py qa re ro rs ru rw sa sb sc sd se sg sh si sk sl sm sn so sr ss st su sv sx
sy sz tc td tf tg th tj tk tl tm tn to tr tt tv tw tz ua ug uk us uy uz va vc
ve vg vi vn vu wf ws ye yt za zm zw
""".split()

TLDS: FrozenSet[str] = frozenset(GENERIC_TLDS + COUNTRY_CODE_TLDS)


class TLDRegistry:
    """Immutable set of TLD labels queried by exact, case-sensitive membership."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names: FrozenSet[str] = frozenset(names)

    @classmethod
    def default(cls) -> "TLDRegistry":
        return cls(TLDS)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TLDRegistry":
        """Load an IANA ``tlds-alpha-by-domain.txt`` style file.

        Lines starting with ``#`` are comments. Labels are lowercased so they
        line up with hostnames as they are usually written in pages.
        """
        names = []
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                names.append(line.lower())
        logger.info(f"Loaded {len(names)} TLDs from {path}")
        return cls(names)

    def is_valid_tld(self, name: str) -> bool:
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

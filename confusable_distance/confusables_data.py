"""Compact confusable table: ``(canonical, confusables)`` pairs.

Hand-curated subset of Unicode confusables.txt covering Latin, Greek,
Cyrillic, Cherokee, Lisu, letterlike, fullwidth and mathematical bold
look-alikes. ``confusable-distance update`` replaces this file with the full
generated table.
"""

from typing import Tuple

COMPACT_CONFUSABLES: Tuple[Tuple[str, str], ...] = (
    ("O", "0\u039f\u041e\u0555\u2c9e\ua4f3\uff10\U0001d7ce\uff2f\U0001d40e"),
    ("l", "1I|\u01c0\u0399\u0406\u04c0\u05c0\u05d5\u05df\u0627\u2113\u2160\u217c\u2223\u23fd\u2c92\u2d4f\ua4f2\uff11\U0001d7cf\uff29\U0001d408\uff4c\U0001d425"),
    ("a", "\u0251\u03b1\u0430\u237a\uff41\U0001d41a"),
    ("b", "\u0184\u042c\u13cf\u15af\uff42\U0001d41b"),
    ("c", "\u03f2\u0441\u1d04\u217d\u2ca5\uff43\U0001d41c"),
    ("d", "\u0501\u217e\uff44\U0001d41d"),
    ("e", "\u0435\u04bd\u212e\u212f\u2147\uff45\U0001d41e"),
    ("f", "\u017f\u1e9d\u0584\uab35\uff46\U0001d41f"),
    ("g", "\u0261\u0581\u210a\u1d83\uff47\U0001d420"),
    ("h", "\u04bb\u0570\u13c2\uff48\U0001d421"),
    ("i", "\u0131\u0269\u03b9\u0456\u2170\uff49\U0001d422"),
    ("j", "\u0458\u03f3\u2149\uff4a\U0001d423"),
    ("n", "\u0578\u057c\uff4e\U0001d427"),
    ("o", "\u03bf\u043e\u0585\u1d0f\u2134\uff4f\U0001d428"),
    ("p", "\u0440\u03c1\u03f1\u2374\uff50\U0001d429"),
    ("q", "\u051b\u0563\u0566\uff51\U0001d42a"),
    ("r", "\u0433\u1d26\u2c85\uff52\U0001d42b"),
    ("s", "\u0455\u01bd\ua731\uff53\U0001d42c"),
    ("u", "\u028b\u03c5\u057d\u1d1c\uff55\U0001d42e"),
    ("v", "\u03bd\u0475\u05d8\u1d20\u2174\u2228\uff56\U0001d42f"),
    ("w", "\u026f\u0461\u051d\u0561\u1d21\uff57\U0001d430"),
    ("x", "\u0445\u00d7\u2179\uff58\U0001d431"),
    ("y", "\u0443\u028f\u03b3\u04af\u10e7\uff59\U0001d432"),
    ("z", "\u1d22\uff5a\U0001d433"),
    ("A", "\u0391\u0410\u13aa\u15c5\ua4ee\uff21\U0001d400"),
    ("B", "\u0392\u0412\u13f4\u15f7\u212c\ua4d0\uff22\U0001d401"),
    ("C", "\u03f9\u0421\u13df\u216d\u2102\u212d\ua4da\uff23\U0001d402"),
    ("D", "\u13a0\u15ea\u216e\u2145\ua4d3\uff24\U0001d403"),
    ("E", "\u0395\u0415\u13ac\u2130\u22ff\ua4f0\uff25\U0001d404"),
    ("F", "\u03dc\u15b4\u2131\ua4dd\uff26\U0001d405"),
    ("G", "\u050c\u13c0\u13f3\ua4d6\uff27\U0001d406"),
    ("H", "\u0397\u041d\u13bb\u157c\u210b\u210c\u210d\ua4e7\uff28\U0001d407"),
    ("J", "\u037f\u0408\u13ab\u148d\ua4d9\uff2a\U0001d409"),
    ("K", "\u039a\u041a\u13e6\u16d5\u212a\ua4d7\uff2b\U0001d40a"),
    ("L", "\u13de\u14aa\u216c\u2112\ua4e1\uff2c\U0001d40b"),
    ("M", "\u039c\u041c\u13b7\u15f0\u216f\u2133\ua4df\uff2d\U0001d40c"),
    ("N", "\u039d\u2115\ua4e0\uff2e\U0001d40d"),
    ("P", "\u03a1\u0420\u13e2\u146d\u2119\ua4d1\uff30\U0001d40f"),
    ("Q", "\u051a\u211a\u2d55\uff31\U0001d410"),
    ("R", "\u01a6\u13a1\u13d2\u1587\u211b\u211c\u211d\ua4e3\uff32\U0001d411"),
    ("S", "\u0405\u054f\u13d5\u13da\ua4e2\uff33\U0001d412"),
    ("T", "\u03a4\u0422\u13a2\u22a4\u27d9\ua4d4\uff34\U0001d413"),
    ("U", "\u054d\u1200\u144c\u222a\u22c3\ua4f4\uff35\U0001d414"),
    ("V", "\u0474\u13d9\u142f\u2164\ua4e6\uff36\U0001d415"),
    ("W", "\u051c\u13b3\u13d4\ua4ea\uff37\U0001d416"),
    ("X", "\u03a7\u0425\u2169\u2573\ua4eb\uff38\U0001d417"),
    ("Y", "\u03a5\u03d2\u04ae\u13a9\u13bd\ua4ec\uff39\U0001d418"),
    ("Z", "\u0396\u13c3\u2124\u2128\ua4dc\uff3a\U0001d419"),
    ("2", "\u01a7\u03e8\ua644\u14bf\uff12\U0001d7d0"),
    ("3", "\u01b7\u021c\u0417\u04e0\u2ccc\uff13\U0001d7d1"),
    ("4", "\u13ce\uff14\U0001d7d2"),
    ("5", "\u01bc\uff15\U0001d7d3"),
    ("6", "\u0431\u13ee\u2cd2\uff16\U0001d7d4"),
    ("8", "\u0222\u0223\u09ea\u0a6a\uff18\U0001d7d6"),
    ("9", "\u09ed\u0a67\u0b68\u2cca\ua76e\uff19\U0001d7d7"),
    ("-", "\u02d7\u06d4\u2010\u2011\u2012\u2013\u2212\ufe58"),
    (".", "\u0660\u06f0\u0701\u2024\ua4f8"),
    (":", "\u02f8\u0589\u05c3\u0703\u0903\u2236\ua789\ufe30"),
    ("/", "\u2044\u2215\u2571\u29f8\u3033"),
    ("'", "`\u00b4\u02b9\u02bb\u02bc\u2018\u2019\u2032"),
    ("7", "\uff17\U0001d7d5"),
    ("k", "\uff4b\U0001d424"),
    ("t", "\uff54\U0001d42d"),
)

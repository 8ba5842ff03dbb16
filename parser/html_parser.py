import logging
import weakref

logger = logging.getLogger(__name__)

class Text:
    def __init__(self, text, parent):
        self.text = text
        self.parent = parent

    @property
    def parent(self):
        return self._parent() if self._parent else None

    @parent.setter
    def parent(self, node):
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def children(self):
        return ()

    def __repr__(self):
        return repr(self.text)

class Element:
    def __init__(self, tag, attributes, parent):
        self.tag = tag
        self.attributes = attributes
        self.children = []
        self.parent = parent

    @property
    def parent(self):
        return self._parent() if self._parent else None

    @parent.setter
    def parent(self, node):
        self._parent = weakref.ref(node) if node is not None else None

    def __repr__(self):
        if self.attributes:
            attrs = " ".join(
                "{}=\"{}\"".format(k, v) for k, v in self.attributes.items())
            return "<" + self.tag + " " + attrs + ">"
        return "<" + self.tag + ">"

class AttributeParser:
    def __init__(self, s):
        self.s = s

    def word(self, part):
        if "=" not in part:
            return part.casefold(), ""
        key, value = part.split("=", 1)
        if len(value) > 2 and value[0] in "\"'" and value[-1] == value[0]:
            value = value[1:-1]
        return key.casefold(), value

    def parse(self):
        parts = self.s.split(" ")
        tag = parts[0].casefold()
        attributes = {}
        for part in parts[1:]:
            if not part: continue
            key, value = self.word(part)
            # first occurrence wins
            if not key or key in attributes: continue
            attributes[key] = value
        return (tag, attributes)

class HTMLParser:

    SELF_CLOSING_TAGS = [
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    ]

    HEAD_TAGS = [
        "base", "basefont", "bgsound", "noscript",
        "link", "meta", "title", "style", "script",
    ]

    def __init__(self, body=""):
        self.body = body
        self.unfinished = []

    def parse(self):
        return self.feed(self.body)

    def feed(self, markup):
        text = ""
        in_tag = False
        for c in markup:
            if c == "<":
                in_tag = True
                if text: self.add_text(text)
                text = ""
            elif c == ">":
                in_tag = False
                self.add_tag(text)
                text = ""
            else:
                text += c
        if not in_tag and text:
            self.add_text(text)
        return self.finish()

    def add_text(self, text):
        if text.isspace(): return
        self.implicit_tags(None)

        if not self.unfinished:
            logger.debug("Dropping text %r: no open element", text)
            return
        parent = self.unfinished[-1]
        node = Text(text, parent)
        parent.children.append(node)

    def add_tag(self, tag):
        tag, attributes = self.get_attributes(tag)

        if tag.startswith("!"):
            logger.debug("Ignoring <%s>", tag)
            return
        self.implicit_tags(tag)

        if tag.startswith("/"):
            if len(self.unfinished) == 1:
                logger.debug("Ignoring <%s>: cannot close the root", tag)
                return

            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)
        elif tag in self.SELF_CLOSING_TAGS:
            if not self.unfinished:
                logger.debug("Dropping <%s>: no open element", tag)
                return
            parent = self.unfinished[-1]
            node = Element(tag, attributes, parent)
            parent.children.append(node)
        else:
            parent = self.unfinished[-1] if self.unfinished else None
            node = Element(tag, attributes, parent)
            self.unfinished.append(node)

    def get_attributes(self, text):
        (tag, attributes) = AttributeParser(text).parse()
        return tag, attributes

    def implicit_tags(self, tag):
        while True:
            open_tags = [node.tag for node in self.unfinished]

            if open_tags == [] and tag != "html":
                logger.debug("Implicit <html> before %r", tag)
                self.add_tag("html")
            elif open_tags == ["html"] and tag not in ["head", "body", "/html"]:
                if tag in self.HEAD_TAGS:
                    logger.debug("Implicit <head> before %r", tag)
                    self.add_tag("head")
                else:
                    logger.debug("Implicit <body> before %r", tag)
                    self.add_tag("body")
            elif open_tags == ["html", "head"] and tag not in ["/head"] + self.HEAD_TAGS:
                logger.debug("Implicit </head> before %r", tag)
                self.add_tag("/head")
            else:
                break

    def finish(self):
        if not self.unfinished:
            self.implicit_tags(None)

        while len(self.unfinished) > 1:
            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)

        return self.unfinished.pop()

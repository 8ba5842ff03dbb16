import skia
from parser.html_parser import *

def print_tree(node, indent=0):
    print(' ' * indent, node)
    for child in node.children:
        print_tree(child, indent + 2)

def tree_to_list(tree, list):
    list.append(tree)
    for child in tree.children:
        tree_to_list(child, list)
    return list

def tree_signature(tree):
    signature = []
    for node in tree_to_list(tree, []):
        if isinstance(node, Text):
            signature.append(("text", node.text))
        else:
            signature.append(("element", node.tag,
                tuple(sorted(node.attributes.items())), len(node.children)))
    return signature

NAMED_COLORS = {
    "black": "#000000",
    "gray":  "#808080",
    "white": "#ffffff",
    "red":   "#ff0000",
    "green": "#00ff00",
    "blue":  "#0000ff",
}

def parse_color(color):
    if color.startswith("#") and len(color) == 7:
        r = int(color[1:3], 16)
        g = int(color[3:5], 16)
        b = int(color[5:7], 16)
        return skia.Color(r, g, b)
    elif color in NAMED_COLORS:
        return parse_color(NAMED_COLORS[color])
    else:
        return skia.ColorBLACK

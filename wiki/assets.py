"""Default stylesheet and favicon shipped with every wiki build."""

from __future__ import annotations

import base64

STYLESHEET_NAME = "style.css"
FAVICON_NAME = "favicon.svg"

DEFAULT_FAVICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48"'
    ' viewBox="0 0 20 16"><text x="0" y="14">📚</text></svg>'
)

DEFAULT_STYLESHEET = """

body {
    font-family: "Avenir Next", Helvetica, Arial, sans-serif;
    padding:1em;
    margin:auto;
    max-width:42em;
    background:#fefefe;
}

h1, h2, h3, h4, h5, h6 {
    font-weight: bold;
}

h1 {
    color: #000000;
    font-size: 28pt;
    border-bottom: 1px solid gray;
}

h2 {
    border-bottom: 1px solid #CCCCCC;
    color: #000000;
    font-size: 24px;
}

h3 {
    font-size: 18px;
    border-bottom: 1px solid #CCCCCC;
}

h4, h5, h6 {
    text-decoration: underline;
}

h4 {
    font-size: 16px;
}

h5 {
    font-size: 14px;
}

h6 {
    color: #777777;
    background-color: inherit;
    font-size: 14px;
}

hr {
    height: 0.2em;
    border: 0;
    color: #CCCCCC;
    background-color: #CCCCCC;
}

p, blockquote, ul, ol, dl, li, table, pre {
    margin: 15px 0;
}

a, a:visited {
    color: #4183C4;
    background-color: inherit;
    text-decoration: none;
}

#message {
    border-radius: 6px;
    border: 1px solid #ccc;
    display:block;
    width:100%;
    height:60px;
    margin:6px 0px;
}

button, #ws {
    font-size: 10pt;
    padding: 4px 6px;
    border-radius: 5px;
    border: 1px solid #bbb;
    background-color: #eee;
}

code, pre, #ws, #message {
    font-family: Monaco;
    font-size: 10pt;
    border-radius: 3px;
    background-color: #F8F8F8;
    color: inherit;
}

code {
    border: 1px solid #EAEAEA;
    margin: 0 2px;
    padding: 0 5px;
}

pre {
    border: 1px solid #CCCCCC;
    overflow: auto;
    padding: 4px 8px;
}

pre > code {
    border: 0;
    margin: 0;
    padding: 0;
}

img {
    padding: 20px;
    max-width: 80%;
    height: auto;
    width: auto\\9;
}

td {
    border: 1px solid lightGray;
    padding-left: 10px;
    padding-right: 10px;
    min-width: 150px;
}

th {
    border-bottom: 1px solid black;
    padding-left: 10px;
}

del {
    color: gray;
}

em {
    color: #088A85;
}

figure {
    border: 1px solid #CCCCCC;
    padding: 10px;
    background-color: #F8F8F8;
    margin: 10px;
}

figcaption {
    font-style: italic;
    font-size: 12px;
    color: darkGray;
}

footer {
    font-size: 10px;
    margin-top: 10em;
    border-top: 1px solid gray;
    text-align: right;
}

#ws { background-color: #f8f8f8; }

.send { color:#77bb77; }
.server { color:#7799bb; }
.error { color:#AA0000; }

#TOC {
     margin-top: 2em;
     position: absolute;
     left: 50px;
     width: 200px;
     font-size: 16px;
}

#TOC li {
    padding: 0;
    margin: 0
}

#TOC ul {
    margin-top: 0;
    margin-bottom: 0;
    padding-left: 15px;

}

@media print {
    #TOC {
        display: none !important;
    }

    h2 {
        page-break-before: auto;
        page-break-after: avoid;
    }

    h2, h3, h4 {
        page-break-after: avoid;
    }

    img {
        display: block;
        margin-left: auto;
        margin-right: auto;
        width: 4.5in;
        page-break-before: auto;
        page-break-after: auto;
        page-break-inside: avoid;
    }

    table {
        page-break-before: auto;
        page-break-after: auto;
        page-break-inside: avoid;
    }

   a:link, a:visited {
        text-decoration: underline
   }

   a:link:after, a:visited:after {
       content: " (" attr(href) ") ";
       font-size: 90%;
   }

}

@media (max-width: 1100px) {
    #TOC {
        margin-top: 2em;
        left: 0;
        position: relative;
    }
}
"""


def stylesheet() -> str:
    """Return the CSS written to ``style.css`` or inlined in standalone pages."""

    return DEFAULT_STYLESHEET


def favicon_svg() -> str:
    return DEFAULT_FAVICON


def favicon_data_uri() -> str:
    """Return the favicon as a base64 ``data:`` URI for standalone pages."""

    encoded = base64.b64encode(DEFAULT_FAVICON.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"

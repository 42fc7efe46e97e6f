#!/usr/bin/env python3

# todo:
# 1) stroke rects in the color given by their stroke attribute (currently always black)
# 2) draw <path> elements; the d-strings are decoded but never painted


'''
svg2pdfmin -- convert simple SVG(s) to a minimal, uncompressed PDF
usage: svg2pdfmin [-debug] [-check] [-o output.pdf] [-columns N] [-rows N] [-font NAME] [-size PT] input1.svg [input2.svg ...]
'''

# ================================================== Imports

import sys
import os
import re
import math
import logging
import contextlib

import xml.etree.ElementTree as ET

from pdfrw import PdfReader, PdfName, PdfArray, PdfDict, IndirectPdfDict, PdfObject, py23_diffs
from pdfrw.errors import PdfParseError

logger = logging.getLogger('svg2pdfmin')

# ================================================== page & grid

# A4 at 72 dpi; the page size is fixed
pageWidth = 595
pageHeight = 842

# SVG user space dimensions assumed when the root <svg> does not declare them
defaultSvgWidth = 400
defaultSvgHeight = 150

# Layout grid cell
columnWidth = 150
rowHeight = 50

# The box that stands in for every gradient, in PDF coordinates: x, y, width, height
gradientBox = [100, 100, 200, 50]

# ================================================== font & document info

# Text is always set in this built-in font, installed under the resource name /F1;
# the font name given by the caller is for display only
baseFont = 'Helvetica'
fontResource = 'F1'

producer = 'svg2pdfmin'

# Processing instruction sets shared by all pages
procSet = [PdfName.PDF, PdfName.Text]

# ================================================== options

defaultOptions = {'columns':'3', 'rows':'10', 'fontName':baseFont, 'fontSize':'12'}

exec_path = os.path.dirname(os.path.abspath(__file__))
ini_path = os.path.join(exec_path, 'svg2pdfmin.ini')

# ================================================== errors

class Svg2PdfError(Exception):
    '''Base class of all errors; each one aborts the conversion run'''

class SourceOpenError(Svg2PdfError):
    '''The SVG source could not be opened or read'''

class DecodeError(Svg2PdfError):
    '''The SVG source is not well-formed XML or not an <svg> document'''

class NoActivePage(Svg2PdfError):
    '''An element was drawn before any page was added'''

class DocumentFinalized(Svg2PdfError):
    '''A page or an element was added after the document was finalized'''

class NotFinalized(Svg2PdfError):
    '''Serialization was requested before the document was finalized'''

class DestinationWriteError(Svg2PdfError):
    '''The PDF could not be written'''

class CheckError(Svg2PdfError):
    '''The written PDF could not be read back'''

# ================================================== class attrDict(dict)

class attrDict(dict):
    def __getattr__(self, key): return self.__getitem__(key)
    def __setattr__(self, key, value): self.__setitem__(key,value)
    def __getitem__(self, key): return dict.__getitem__(self, key) if key in self else None
    def __setitem__(self, key, value):
        if value is not None: dict.__setitem__(self, key, value)
        elif key in self: del self[key]

# ================================================== readOptions()

def readOptions(iniPath: str):
    '''Reads options from the key=value lines of iniPath.
       A missing file means no options; lines without a '=' are skipped'''
    options = {}
    try:
        with open(iniPath, 'r') as f:
            for line in f:
                l = re.split('=', line.strip(), maxsplit=1)
                if len(l) != 2:
                    if line.strip() != '': logger.debug('skipping: %s', line.strip())
                    continue
                options.update({l[0].strip():l[1].strip()})
    except FileNotFoundError:
        logger.debug('No options file at %s', iniPath)
        return options
    except OSError as e:
        raise Svg2PdfError(f'error reading options from {iniPath}: {e}') from e
    logger.debug('Read options from %s: %s', iniPath, options)
    return options

# ================================================== SVG decoding

def stripNamespaces(el: ET.Element):
    '''Removes namespaces from the tags & attribute names of the element tree rooted at el'''
    if el.tag.startswith("{"):
        el.tag = el.tag.split('}', 1)[1]  # strip namespace
    for k in list(el.attrib.keys()):
        if k.startswith("{"):
            k2 = k.split('}', 1)[1]
            el.attrib[k2] = el.attrib[k]
            del el.attrib[k]
    for child in el:
        stripNamespaces(child)

def number(node: ET.Element, attr: str):
    '''Returns a numeric attribute of node as a float. Absent or empty attributes read as 0;
       anything that is not a finite decimal number is a DecodeError'''
    v = node.get(attr, '').strip()
    if v == '': return 0.0
    try:
        value = float(v)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value):
        raise DecodeError(f'error decoding SVG: invalid <{node.tag}> attribute {attr}="{v}"')
    return value

def characterData(node: ET.Element):
    '''The character data directly inside node: the text of child elements is skipped, their tails are not'''
    return (node.text or '') + ''.join(kid.tail or '' for kid in node)

def decodeSvg(data, name = '<svg>'):
    '''Decodes SVG source (bytes or str) into an attrDict with the root's width/height (str or None)
       and the lists: rects, texts, paths & gradients. Only the root's direct children are considered;
       elements other than rect, text, path & linearGradient are ignored'''
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise DecodeError(f'error decoding SVG {name}: {e}') from e
    stripNamespaces(root)
    if root.tag != 'svg':
        raise DecodeError(f'error decoding SVG {name}: expected <svg> root element, got <{root.tag}>')

    svg = attrDict(width = root.get('width'), height = root.get('height'),
                   rects = [], texts = [], paths = [], gradients = [])

    for kid in root:
        if kid.tag == 'rect':
            svg.rects.append(attrDict(
                x = number(kid,'x'), y = number(kid,'y'),
                width = number(kid,'width'), height = number(kid,'height'),
                stroke = kid.get('stroke')
            ))
        elif kid.tag == 'text':
            svg.texts.append(attrDict(
                x = number(kid,'x'), y = number(kid,'y'),
                content = characterData(kid),
                font = kid.get('font'),
                size = kid.get('font-size')
            ))
        elif kid.tag == 'path':
            svg.paths.append(attrDict(d = kid.get('d', '')))
        elif kid.tag == 'linearGradient':
            stops = [attrDict(offset = s.get('offset'), color = s.get('stop-color')) for s in kid if s.tag == 'stop']
            svg.gradients.append(attrDict(
                id = kid.get('id'),
                x1 = kid.get('x1'), y1 = kid.get('y1'), x2 = kid.get('x2'), y2 = kid.get('y2'),
                stops = stops
            ))
        else:
            logger.debug('ignoring <%s> in %s', kid.tag, name)

    return svg

def readSvg(svgPath: str):
    '''Reads and decodes an SVG file'''
    try:
        with open(svgPath, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise SourceOpenError(f'error opening SVG file {svgPath}: {e}') from e
    return decodeSvg(data, svgPath)

def validateSvgs(svgPaths: list):
    '''Makes sure every SVG file can be read and decoded before anything gets converted'''
    logger.info('Validating SVG files ...')
    for svgPath in svgPaths:
        readSvg(svgPath)
    logger.info('Validated %d SVG files', len(svgPaths))

# ================================================== geometry

def svgDimensions(width: str, height: str, pageWidth = pageWidth, pageHeight = pageHeight):
    '''Returns the SVG (width, height) from the root's declared width & height attributes.
       If either is absent both defaults (400 x 150) apply; a declared value which is not
       a finite positive decimal number (e.g., has units), or which is so small that the page
       size divided by it is not finite, silently falls back to its own default'''
    if width is None or height is None: return float(defaultSvgWidth), float(defaultSvgHeight)
    def parse(v, default, extent):
        try:
            d = float(v)
        except ValueError:
            return float(default)
        ok = math.isfinite(d) and d > 0 and math.isfinite(extent / d)
        return d if ok else float(default)
    return parse(width, defaultSvgWidth, pageWidth), parse(height, defaultSvgHeight, pageHeight)

def scaleFactors(svgWidth: float, svgHeight: float, width = pageWidth, height = pageHeight):
    '''Returns (scaleX, scaleY) that fit the SVG user space onto the page'''
    return width / svgWidth, height / svgHeight

def svgToPdf(x: float, y: float, scaleX: float, scaleY: float, height = pageHeight):
    '''Maps an SVG point to PDF: scale, then flip the y-axis (SVG's origin is top-left, PDF's is bottom-left)'''
    return x * scaleX, height - y * scaleY

def applyTransform(x: float, y: float, transform: str, width = pageWidth):
    '''Applies a named transform to an already mapped point. Only "rotate" is known:
       a fixed 90-degree rotation, (x, y) -> (y, width - x); any other name leaves the point as is'''
    if transform == 'rotate': return y, width - x
    return x, y

def checkFinite(tag: str, *values):
    '''Makes sure an element's mapped page values are finite: huge SVG coordinates overflow once scaled'''
    if not all(math.isfinite(v) for v in values):
        raise DecodeError(f'error decoding SVG: <{tag}> does not map to finite page coordinates')

# ================================================== content stream operators

def num(x: float):
    '''Number as written to a content stream: at most 2 decimals, no trailing zeros'''
    return f'{round(x*100)/100:f}'.rstrip('0').rstrip('.')

def escapeText(text: str):
    '''Escapes the three characters that are special inside a PDF literal string: \\, ( & )'''
    return text.replace('\\', '\\\\').replace('(', '\\(').replace(')', '\\)')

def isTextEncodable(text: str, encoding: str):
    '''Checks if the all chars in text are from the code page specified by the encoding'''
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True

def latin1(text: str):
    '''The PDF is written in Latin-1: characters outside of it are replaced with "?"'''
    if isTextEncodable(text, 'latin-1'): return text
    logger.warning('text %r has characters outside Latin-1; they are replaced with "?"', text)
    return text.encode('latin-1', 'replace').decode('latin-1')

def rectOperators(x: float, y: float, w: float, h: float):
    '''A closed outline with (x, y) as its top-left corner, stroked in black'''
    return [
        f'{num(x)} {num(y)} m',
        f'{num(x+w)} {num(y)} l',
        f'{num(x+w)} {num(y-h)} l',
        f'{num(x)} {num(y-h)} l',
        'h',
        '0 0 0 RG',
        'S',
    ]

def textOperators(x: float, y: float, text: str, fontSize: float):
    '''A text object showing text at (x, y) in the built-in font'''
    return [
        'BT',
        f'/{fontResource} {num(fontSize)} Tf',
        f'{num(x)} {num(y)} Td',
        f'({escapeText(text)}) Tj',
        'ET',
    ]

def gradientOperators():
    '''The gradient placeholder: the gradientBox stroked in blue'''
    x, y, w, h = gradientBox
    return [f'{num(x)} {num(y)} {num(w)} {num(h)} re', '0 0 1 RG', 'S']

# ================================================== class GRID

class GRID:
    '''The layout cursor. It is advanced by one column for every rect/text that is placed
       and wraps to a new row when the next column would not fit on the page.
       It does bookkeeping only: drawing coordinates never come from it'''

    def __init__(self, columns: int, rows: int, width = pageWidth):
        self.maxColumns = columns
        self.maxRows = rows
        self.width = width
        self.columnWidth = columnWidth
        self.rowHeight = rowHeight
        self.currentX = 0
        self.currentY = 0
        self.cells = [] # (tag, row, column) for every element placed so far

    def row(self): return int(self.currentY // self.rowHeight)
    def column(self): return int(self.currentX // self.columnWidth)

    def addRow(self):
        '''Moves the cursor to the start of the next row'''
        self.currentY += self.rowHeight
        self.currentX = 0

    def addColumn(self):
        '''Moves the cursor one column to the right, wrapping to a new row if the next column would not fit'''
        self.currentX += self.columnWidth
        if self.currentX + self.columnWidth > self.width: self.addRow()

    def place(self, tag: str):
        '''Advances the cursor for an element and returns the (row, column) cell it lands on'''
        self.addColumn()
        row, column = self.row(), self.column()
        self.cells.append((tag, row, column))
        if row >= self.maxRows or column >= self.maxColumns:
            logger.debug('%s placed at row %d, column %d: outside the %d x %d grid',
                          tag, row, column, self.maxRows, self.maxColumns)
        return row, column

# ================================================== class PAGE

class PAGE:
    '''A page: its number (starting from 1) and the content stream lines written to it'''

    def __init__(self, number: int):
        self.number = number
        self.lines = []

    def write(self, lines: list):
        self.lines.extend(lines)

    def stream(self):
        '''The content stream: all lines written so far, newline-joined'''
        return '\n'.join(self.lines)

# ================================================== class DOC

class DOC:
    '''
    The document being built. It owns the page geometry, the scale factors of the SVG being converted,
    the layout grid, the font settings & the pages. Its states are: Empty (no pages), HasPages
    and Finalized; elements are drawn on the last page added; once finalized it can only be serialized
    '''

    def __init__(self, columns = 3, rows = 10, fontName = baseFont, fontSize = 12, debug = False):
        self.pageWidth = pageWidth
        self.pageHeight = pageHeight
        self.scaleX, self.scaleY = scaleFactors(defaultSvgWidth, defaultSvgHeight, pageWidth, pageHeight)
        self.grid = GRID(columns, rows, pageWidth)
        self.fontName = fontName # display only
        self.fontSize = fontSize
        self.debug = debug # insert comments in the content streams
        self.pages = []
        self.finalized = False

    @property
    def state(self):
        if self.finalized: return 'Finalized'
        return 'HasPages' if len(self.pages) > 0 else 'Empty'

    # -------------------------------------------------- pages

    def addPage(self):
        '''Appends a new empty page and makes it the current one'''
        if self.finalized: raise DocumentFinalized('cannot add a page: the document is finalized')
        page = PAGE(len(self.pages) + 1)
        self.pages.append(page)
        return page

    def currentPage(self):
        '''The page elements are drawn on'''
        if self.finalized: raise DocumentFinalized('cannot draw: the document is finalized')
        if len(self.pages) == 0: raise NoActivePage('cannot draw: the document has no pages')
        return self.pages[-1]

    def pdfWrite(self, lines: list):
        '''Write lines to the current page's content stream'''
        self.currentPage().write(lines)

    def pdfComment(self, s: str):
        '''When self.debug == True, insert a comment in PDF'''
        if self.debug: self.pdfWrite(['% ' + latin1(s)])

    def setScale(self, svgWidth: float, svgHeight: float):
        self.scaleX, self.scaleY = scaleFactors(svgWidth, svgHeight, self.pageWidth, self.pageHeight)

    # -------------------------------------------------- drawing

    def drawGradient(self, gradient: attrDict):
        '''Draws a placeholder for a linear gradient; its stops & coordinates are not used'''
        self.currentPage()
        self.pdfComment('linearGradient' if gradient.id is None else f'linearGradient id={gradient.id}')
        self.pdfWrite(gradientOperators())

    def drawRect(self, rect: attrDict):
        '''Strokes the rect outline; rect.stroke is not consulted'''
        self.currentPage()
        x, y = svgToPdf(rect.x, rect.y, self.scaleX, self.scaleY, self.pageHeight)
        w, h = rect.width * self.scaleX, rect.height * self.scaleY
        checkFinite('rect', x, y, w, h, x + w, y - h)
        row, column = self.grid.place('rect')
        logger.debug('rect at (%s, %s) %s x %s, grid cell (%d, %d)', num(x), num(y), num(w), num(h), row, column)
        self.pdfComment('rect')
        self.pdfWrite(rectOperators(x, y, w, h))

    def drawText(self, text: attrDict):
        '''Shows text.content at its mapped & rotated anchor in the document's font size'''
        self.currentPage()
        x, y = svgToPdf(text.x, text.y, self.scaleX, self.scaleY, self.pageHeight)
        x, y = applyTransform(x, y, 'rotate', self.pageWidth)
        checkFinite('text', x, y)
        row, column = self.grid.place('text')
        content = text.content if text.content is not None else ''
        logger.debug('text %r at (%s, %s), grid cell (%d, %d)', content, num(x), num(y), row, column)
        self.pdfComment('text')
        self.pdfWrite(textOperators(x, y, latin1(content), self.fontSize))

    def drawPath(self, path: attrDict):
        '''Paths are accepted but not rendered'''
        self.currentPage()
        d = path.d if path.d is not None else ''
        logger.debug('path not rendered: d="%s"', d[:32] + '..' if len(d) > 32 else d)

    # -------------------------------------------------- conversion

    def render(self, svg: attrDict):
        '''Renders a decoded SVG onto a new page: gradients first, then rects, then texts'''
        page = self.addPage()
        self.setScale(*svgDimensions(svg.width, svg.height, self.pageWidth, self.pageHeight))
        for gradient in svg.gradients: self.drawGradient(gradient)
        for rect in svg.rects: self.drawRect(rect)
        for text in svg.texts: self.drawText(text)
        for path in svg.paths: self.drawPath(path)
        return page

    def convert(self, svgPath: str):
        '''Converts an SVG file into a new page'''
        return self.render(readSvg(svgPath))

    def finalize(self):
        '''No pages or elements can be added after this'''
        self.finalized = True

    def save(self, pdfPath: str):
        '''Finalizes the document, serializes it & writes it to pdfPath'''
        self.finalize()
        data = SERIALIZER().serialize(self)
        writePdf(pdfPath, data)
        logger.info('Successfully generated %s', pdfPath)

# ================================================== object numbering

def objectNumbers(objects: list):
    '''The numbering scheme: objects are numbered 1, 2, 3.. in the order they are emitted.
       Returns a map from id(obj) to obj's number'''
    return {id(obj): n for n, obj in enumerate(objects, 1)}

# ================================================== class PDFMODEL

class PDFMODEL:
    '''
    The PDF objects of a finalized DOC in emission order:
    1 Catalog, 2 Pages, 3 Font, then a (Page, Contents) pair for every page starting from 4,
    then the document Info dictionary and the ProcSet array shared by the pages.
    Objects refer to each other directly; numbers are assigned once the list is complete
    '''

    def __init__(self, doc: DOC):
        if not doc.finalized: raise NotFinalized('cannot serialize: the document is not finalized')

        self.pagesRoot = IndirectPdfDict(Type = PdfName.Pages)
        self.catalog = IndirectPdfDict(Type = PdfName.Catalog, Pages = self.pagesRoot)
        self.font = IndirectPdfDict(
            Type = PdfName.Font,
            Subtype = PdfName.Type1,
            BaseFont = PdfName(baseFont),
            Name = PdfName(fontResource)
        )
        self.info = IndirectPdfDict(Producer = PdfObject(f'({escapeText(producer)})'))
        self.procSet = PdfArray(procSet)
        self.procSet.indirect = True

        self.pages = []
        self.contents = []
        for page in doc.pages:
            stream = page.stream()
            contents = IndirectPdfDict(Length = len(stream))
            contents.stream = stream
            fonts = PdfDict()
            fonts[PdfName(fontResource)] = self.font
            self.pages.append(IndirectPdfDict(
                Type = PdfName.Page,
                Parent = self.pagesRoot,
                MediaBox = PdfArray([0, 0, doc.pageWidth, doc.pageHeight]),
                Resources = PdfDict(Font = fonts, ProcSet = self.procSet),
                Contents = contents
            ))
            self.contents.append(contents)

        self.pagesRoot.Kids = PdfArray(self.pages)
        self.pagesRoot.Count = len(self.pages)

        self.objects = [self.catalog, self.pagesRoot, self.font]
        for pdfPage, contents in zip(self.pages, self.contents):
            self.objects += [pdfPage, contents]
        self.objects += [self.info, self.procSet]

        self.numbers = objectNumbers(self.objects)

    def number(self, obj):
        return self.numbers[id(obj)]

    def reference(self, obj):
        return f'{self.number(obj)} 0 R'

# ================================================== class SERIALIZER

class SERIALIZER:
    '''
    Writes a finalized DOC as PDF. Lines are encoded as they are appended and a running
    byte count is kept, so every object's offset is known the moment its "obj" line is written.
    Lines are joined with a single newline, which the count includes
    '''

    def __init__(self):
        self.reset()

    def reset(self):
        self.model = None
        self.lines = []
        self.offset = 0
        self.offsets = {}

    def append(self, line: str):
        data = py23_diffs.convert_store(line)
        self.lines.append(data)
        self.offset += len(data) + 1

    def format(self, value):
        '''PDF syntax for value as it appears inside another object; indirect objects become references'''
        if getattr(value, 'indirect', False): return self.model.reference(value)
        return self.formatDirect(value)

    def formatDirect(self, value):
        if isinstance(value, dict):
            return '<< ' + ' '.join(f'{key} {self.format(v)}' for key, v in value.items()) + ' >>'
        if isinstance(value, list):
            return '[' + ' '.join(self.format(v) for v in value) + ']'
        if isinstance(value, (int, float)):
            return num(value)
        return str(value)

    def writeObject(self, obj):
        n = self.model.number(obj)
        self.offsets[n] = self.offset
        self.append(f'{n} 0 obj')
        if isinstance(obj, dict):
            self.append('<<')
            for key, value in obj.items():
                self.append(f'{key} {self.format(value)}')
            self.append('>>')
            if obj.stream is not None:
                self.append('stream')
                self.append(obj.stream)
                self.append('endstream')
        else:
            self.append(self.formatDirect(obj))
        self.append('endobj')

    def serialize(self, doc: DOC):
        '''Returns the PDF file contents (bytes) for doc'''
        self.reset()
        self.model = PDFMODEL(doc)

        # Header: version & a comment with binary chars so that the file is treated as binary
        self.append('%PDF-1.4')
        self.append('%âãÏÓ')

        for obj in self.model.objects:
            self.writeObject(obj)

        # Cross-reference table
        size = len(self.model.objects) + 1
        xrefOffset = self.offset
        self.append('xref')
        self.append(f'0 {size}')
        self.append('0000000000 65535 f ')
        for n in range(1, size):
            self.append(f'{self.offsets[n]:010d} 00000 n ')

        # Trailer
        self.append('trailer')
        self.append('<<')
        self.append(f'/Size {size}')
        self.append(f'/Root {self.model.reference(self.model.catalog)}')
        self.append(f'/Info {self.model.reference(self.model.info)}')
        self.append('>>')
        self.append('startxref')
        self.append(str(xrefOffset))
        self.append('%%EOF')

        logger.debug('serialized %d pages, %d objects, xref at %d', len(doc.pages), size - 1, xrefOffset)
        return b'\n'.join(self.lines) + b'\n'

# ================================================== writePdf()

def writePdf(pdfPath: str, data: bytes):
    '''Writes data to a temporary file next to pdfPath and then moves it over pdfPath,
       so that pdfPath either keeps what it had or gets the complete file'''
    pdfPath = os.fspath(pdfPath)
    tmpPath = pdfPath + '.tmp'
    try:
        with open(tmpPath, 'wb') as f:
            f.write(data)
        os.replace(tmpPath, pdfPath)
    except OSError as e:
        with contextlib.suppress(OSError):
            os.remove(tmpPath)
        raise DestinationWriteError(f'error writing PDF {pdfPath}: {e}') from e

# ================================================== checkPdf()

def checkPdf(pdfPath: str, pageCount: int):
    '''Reads pdfPath back with pdfrw, which finds the objects through the xref table,
       and makes sure it has pageCount pages. Returns the number of pages'''
    try:
        reader = PdfReader(os.fspath(pdfPath))
        pages = len(reader.pages)
    except (PdfParseError, OSError) as e:
        raise CheckError(f'error reading back {pdfPath}: {e}') from e
    if pages != pageCount:
        raise CheckError(f'error reading back {pdfPath}: found {pages} pages, expected {pageCount}')
    logger.info('Checked %s: %d pages', pdfPath, pages)
    return pages

# ================================================== svg2pdf()

def svg2pdf(pdfPath: str, svgPaths: list, columns = 3, rows = 10, fontName = baseFont, fontSize = 12,
            debug = False, check = False):
    '''Converts SVG files to a PDF at pdfPath, one page per SVG. Returns the DOC'''
    validateSvgs(svgPaths)
    doc = DOC(columns, rows, fontName, fontSize, debug)

    logger.info('Parsing and converting SVG files ...')
    for svgPath in svgPaths:
        logger.info('+ %s', svgPath)
        doc.convert(svgPath)

    logger.info('Exporting %d pages to: %s', len(doc.pages), pdfPath)
    if debug: logger.info('Debugging comments have been inserted in PDF; use a text editor to inspect')
    doc.save(pdfPath)

    if check: checkPdf(pdfPath, len(doc.pages))
    return doc

# ================================================== MAIN

helpMessage = """\
svg2pdfmin -- convert simple SVG(s) to a minimal, uncompressed PDF
usage: svg2pdfmin [-debug] [-check] [-o output.pdf] [-columns N] [-rows N] [-font NAME] [-size PT] input1.svg [input2.svg ...]
if -o is not specified, output is written to input1.svg.pdf
options are read from svg2pdfmin.ini (key=value lines: columns, rows, fontName, fontSize) and overridden by the keys
"""

# keys that take a value, and the options they set
valueKeys = {'-columns':'columns', '-rows':'rows', '-font':'fontName', '-size':'fontSize'}

def main(argv = None):
    '''Command line entry point; returns the exit status'''
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level = logging.INFO, format = '%(message)s')

    debug = False
    check = False
    pdfPath = None

    try:
        options = dict(defaultOptions)
        options.update(readOptions(ini_path))

        while len(args) > 0 and args[0][:1] == '-':
            key = args.pop(0)
            if key == '-h': print(helpMessage); return 0
            elif key == '-debug': debug = True
            elif key == '-check': check = True
            elif key == '-o' or key in valueKeys:
                if len(args) == 0: logger.error('error: %s needs a value', key); return 2
                value = args.pop(0)
                if key == '-o': pdfPath = value
                else: options[valueKeys[key]] = value
            else:
                logger.error('error: invalid key: %s', key); return 2

        if len(args) == 0: print(helpMessage); return 2
        if debug: logging.getLogger().setLevel(logging.DEBUG)
        if pdfPath is None: pdfPath = args[0] + '.pdf'

        try:
            columns, rows = int(options['columns']), int(options['rows'])
            fontSize = float(options['fontSize'])
        except ValueError as e:
            raise Svg2PdfError(f'invalid option value: {e}') from e
        if columns < 1 or rows < 1:
            raise Svg2PdfError(f'invalid option value: the grid needs at least 1 column & 1 row, got {columns} x {rows}')
        if not (math.isfinite(fontSize) and fontSize > 0):
            raise Svg2PdfError(f'invalid option value: font size must be a positive number, got {options["fontSize"]}')

        svg2pdf(pdfPath, args, columns, rows, options['fontName'], fontSize, debug, check)

    except Svg2PdfError as e:
        logger.error('error: %s', e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Port layer - Interfaces between domain and adapters

Input Ports (Use Cases):
- GenerateCode: Render a barcode image for a request

Output Ports (External Dependencies):
- SymbolEncoder: Payload to natural-size bitmap, one per symbology
- ImageSerializer: Truecolor buffer to image bytes
"""

from barcode_server.port.input import *
from barcode_server.port.output import *

from barcode_server.adapter.output.png.png_serializer_impl import PngSerializerImpl

__all__ = ["PngSerializerImpl"]

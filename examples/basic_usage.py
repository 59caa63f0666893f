"""
Basic usage example for the barcode pipeline

This script demonstrates:
1. Wiring encoders and the PNG serializer
2. Rendering every symbology through the GenerateCode use case
3. Handling a classified failure
"""

import asyncio
from pathlib import Path

from returns.result import Failure

from barcode_server.adapter import (
    AztecEncoderImpl,
    Code39EncoderImpl,
    Code93EncoderImpl,
    Code128EncoderImpl,
    EanEncoderImpl,
    PngSerializerImpl,
    QrEncoderImpl,
)
from barcode_server.application import EncoderDispatcher, GenerateCodeImpl
from barcode_server.port.input import GenerateCodeRequest

SAMPLES = [
    ("ean", "5901234123457", "300x150"),
    ("code39", "Hello, World!", "400x100"),
    ("code93", "TEST93", "400x100"),
    ("code128", "Code 128!", "400x100"),
    ("aztec", "HELLO AZTEC", "200x200"),
    ("qr", "https://example.com", "200x200"),
]


async def main():
    """Run the example"""

    print("=" * 60)
    print("Barcode Server - Basic Usage Example")
    print("=" * 60)

    # 1. Setup: Create encoders and use case
    print("\n1. Setting up pipeline...")

    dispatcher = EncoderDispatcher(
        [
            EanEncoderImpl(),
            Code39EncoderImpl(),
            Code93EncoderImpl(),
            Code128EncoderImpl(),
            AztecEncoderImpl(),
            QrEncoderImpl(error_correction="M"),
        ]
    )
    generate_code = GenerateCodeImpl(dispatcher=dispatcher, serializer=PngSerializerImpl())

    print("✓ Encoders registered:", ", ".join(s.value for s in dispatcher.symbologies))

    # 2. Render one image per symbology
    print("\n2. Rendering samples...")

    out_dir = Path("barcodes")
    out_dir.mkdir(exist_ok=True)

    for symbology, data, size in SAMPLES:
        result = await generate_code.execute(GenerateCodeRequest(symbology=symbology, data=data, size=size))

        if isinstance(result, Failure):
            print(f"✗ {symbology}: {result.failure()}")
            continue

        response = result.unwrap()
        path = out_dir / f"{symbology}.png"
        path.write_bytes(response.image)
        print(f"✓ {symbology:8s} {response.size} -> {path} ({len(response.image)} bytes)")

    # 3. Failures are values, classified by stage
    print("\n3. Handling a failure...")

    result = await generate_code.execute(GenerateCodeRequest(symbology="ean", data="12345678901", size="200x100"))
    if isinstance(result, Failure):
        error = result.failure()
        print(f"✓ {type(error).__name__}: {error}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())

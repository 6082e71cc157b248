"""
Unit tests for multipart encoding.

python -m pytest tests/test_http/test_multipart.py
"""

from mindscape.http.multipart import encode_document, new_boundary


class TestEncodeDocument:

    def test_single_file_part(self):
        encoded = encode_document(b"%PDF-1.7\nbody", "notes.pdf", boundary="abc123")

        assert encoded.boundary == "abc123"
        assert encoded.content_type == "multipart/form-data; boundary=abc123"
        assert encoded.headers == {"Content-Type": "multipart/form-data; boundary=abc123"}
        assert encoded.body.startswith(b"--abc123\r\n")
        assert encoded.body.endswith(b"\r\n--abc123--\r\n")
        assert b'Content-Disposition: form-data; name="file"; filename="notes.pdf"' in encoded.body
        assert b"Content-Type: application/pdf\r\n\r\n%PDF-1.7\nbody\r\n" in encoded.body
        # One part only
        assert encoded.body.count(b"--abc123\r\n") == 1

    def test_reproducible_apart_from_boundary(self):
        content = bytes(range(256)) * 64

        first = encode_document(content, "scan.pdf")
        second = encode_document(content, "scan.pdf")

        assert first.boundary != second.boundary
        assert (
            first.body.replace(first.boundary.encode(), b"B")
            == second.body.replace(second.boundary.encode(), b"B")
        )

    def test_payload_is_embedded_verbatim(self):
        content = b"\x00\xff\r\n--not-a-boundary\r\n\x89PNG"

        encoded = encode_document(content, "odd.pdf", boundary="xyz")

        assert content in encoded.body

    def test_custom_field(self):
        encoded = encode_document(b"data", "a.bin", boundary="b", field_name="upload",
                                  content_type="application/octet-stream")

        assert b'name="upload"; filename="a.bin"' in encoded.body
        assert b"Content-Type: application/octet-stream" in encoded.body


class TestBoundary:

    def test_boundary_is_random_hex(self):
        boundaries = {new_boundary() for _ in range(100)}

        assert len(boundaries) == 100
        for boundary in boundaries:
            assert len(boundary) == 32
            int(boundary, 16)

    def test_boundary_absent_from_realistic_content(self):
        content = b"%PDF-1.7\n" + b"stream\nBT /F1 12 Tf (Hello) Tj ET\nendstream\n" * 500

        encoded = encode_document(content, "doc.pdf")

        assert encoded.boundary.encode() not in content

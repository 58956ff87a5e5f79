"""Images, their on-screen instances and the canvas that orders them for drawing."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List

from wirefdf.errors import MlxErrno, MlxError
from wirefdf.pixels import BPP, draw_pixel
from wirefdf.renderqueue import sort_render_queue

INT16_MAX = 32767


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= INT16_MAX and 0 < height <= INT16_MAX):
        raise MlxError(MlxErrno.INVDIM)


@dataclass
class Instance:
    """One placement of an image on the canvas."""

    x: int
    y: int
    z: int
    enabled: bool = True


@dataclass
class Texture:
    """A block of RGBA pixel data that is not placed on a canvas."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP


class Image:
    """A width by height buffer of RGBA pixels that may be shown several times."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self.pixels = bytearray(width * height * BPP)
        self.instances: List[Instance] = []
        self.enabled = True

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is out of bounds")
        return (y * self._width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to an RGBA colour."""
        draw_pixel(self.pixels, self._offset(x, y), color)

    def pixel(self, x: int, y: int) -> int:
        """Return the RGBA colour at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.pixels[offset:offset + BPP], "big")

    def resize(self, width: int, height: int) -> None:
        """Scale the pixel data to a new size by nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self._width and height == self._height:
            return
        old_width, old_height = self._width, self._height
        wstep = _f32(old_width / width)
        hstep = _f32(old_height / height)
        columns = [min(int(_f32(i * wstep)), old_width - 1) for i in range(width)]
        source = self.pixels
        resized = bytearray(width * height * BPP)
        for j in range(height):
            row = min(int(_f32(j * hstep)), old_height - 1) * old_width
            for i, column in enumerate(columns):
                src = (row + column) * BPP
                dst = (j * width + i) * BPP
                resized[dst:dst + BPP] = source[src:src + BPP]
        self.pixels = resized
        self._width = width
        self._height = height


@dataclass(eq=False)
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        return self.image.instances[self.instance_id]


class Canvas:
    """The set of images of one window and the queue in which they are drawn."""

    def __init__(self, width: int, height: int, title: str = "wirefdf") -> None:
        if width <= 0:
            raise ValueError("window width must be positive")
        if height <= 0:
            raise ValueError("window height must be positive")
        self.width = width
        self.height = height
        self.title = title
        self.images: List[Image] = []
        self.render_queue: List[DrawCall] = []
        self.zdepth = 0
        self._sort_pending = False

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image that belongs to this canvas."""
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of ``image`` at (x, y) and return its index.

        Every new instance lies one step above all those placed before it.
        """
        index = len(image.instances)
        image.instances.append(Instance(x, y, self.zdepth))
        self.zdepth += 1
        self.render_queue.insert(0, DrawCall(image, index))
        self._sort_pending = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove an image and every draw call that refers to it."""
        self.render_queue = [call for call in self.render_queue if call.image is not image]
        for position, candidate in enumerate(self.images):
            if candidate is image:
                del self.images[position]
                image.instances.clear()
                break

    def texture_to_image(self, texture: Texture) -> Image:
        """Create an image on this canvas holding a copy of a texture's pixels."""
        if texture.bytes_per_pixel != BPP:
            raise ValueError(f"textures must have {BPP} bytes per pixel")
        size = texture.width * texture.height * BPP
        if len(texture.pixels) < size:
            raise ValueError("texture holds fewer pixels than its dimensions need")
        image = self.new_image(texture.width, texture.height)
        image.pixels[:] = texture.pixels[:size]
        return image

    def set_instance_depth(self, instance: Instance, z: int) -> None:
        """Move an instance to depth ``z``; the queue is re-sorted before drawing."""
        if instance.z == z:
            return
        instance.z = z
        self._sort_pending = True

    def render_order(self) -> List[DrawCall]:
        """Return the enabled draw calls in the order they are drawn, lowest depth first."""
        if self._sort_pending:
            self._sort_pending = False
            self.render_queue = sort_render_queue(self.render_queue, key=lambda call: call.instance.z)
        return [
            call for call in self.render_queue
            if call.image.enabled and call.instance.enabled
        ]
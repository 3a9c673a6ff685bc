"""Blocs média — image, galerie, vidéo, audio, document Drive, HTML libre."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockData


class ImageData(BlockData):
    url: str = "https://picsum.photos/800/400"
    caption: str = ""
    width: Literal["full", "large", "medium", "small"] = "medium"
    animation: Optional[Literal["none", "zoom", "pan"]] = "none"


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    data: ImageData = ImageData()


class GalleryData(BlockData):
    title: str = "Galerie photos"
    images: List[str] = [
        "https://picsum.photos/400/300",
        "https://picsum.photos/400/301",
        "https://picsum.photos/400/302",
    ]


class GalleryBlock(BaseBlock):
    type: Literal["gallery"] = "gallery"
    data: GalleryData = GalleryData()


class VideoData(BlockData):
    title: str = ""
    url: str = ""


class VideoBlock(BaseBlock):
    type: Literal["video"] = "video"
    data: VideoData = VideoData()


class AudioData(BlockData):
    title: str = "Hymne de l'école"
    audio_url: str = ""
    auto_play: bool = False


class AudioBlock(BaseBlock):
    type: Literal["audio"] = "audio"
    data: AudioData = AudioData()


class DriveData(BlockData):
    title: str = "Documents de l'école"
    embed_url: str = ""
    height: str = "500px"


class DriveBlock(BaseBlock):
    type: Literal["drive"] = "drive"
    data: DriveData = DriveData()


class HtmlData(BlockData):
    code: str = "<div style='padding:20px; background:#f0f0f0; text-align:center'>Zone HTML personnalisée</div>"
    height: str = "auto"


class HtmlBlock(BaseBlock):
    type: Literal["html"] = "html"
    data: HtmlData = HtmlData()

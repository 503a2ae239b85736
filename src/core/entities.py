from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Track:
    """
    Canonical representation of a candidate track contributed by a source.
    `id` is the identity key used for deduplication.
    """
    id: str
    name: str
    uri: str = ""
    artists: Tuple[str, ...] = ()
    album: str = ""
    image_urls: Tuple[str, ...] = ()
    isrc: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Track":
        """
        Build a Track from a Spotify-style track object.
        Artists and album may be plain strings or {"name": ...} objects.
        """
        artists = tuple(
            a.get("name", "") if isinstance(a, Mapping) else str(a)
            for a in data.get("artists", [])
        )

        album = data.get("album", "")
        image_urls: Tuple[str, ...] = tuple(data.get("image_urls", []))
        if isinstance(album, Mapping):
            if not image_urls:
                image_urls = tuple(
                    img.get("url", "") for img in album.get("images", [])
                )
            album = album.get("name", "")

        isrc = data.get("isrc")
        if isrc is None:
            isrc = (data.get("external_ids") or {}).get("isrc")

        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            uri=data.get("uri", ""),
            artists=artists,
            album=album,
            image_urls=image_urls,
            isrc=isrc,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "uri": self.uri,
            "artists": list(self.artists),
            "album": self.album,
            "image_urls": list(self.image_urls),
            "isrc": self.isrc,
        }


@dataclass
class BlendResult:
    """
    Final blended sequence plus the number of tracks each source contributed.
    """
    tracks: List[Track] = field(default_factory=list)
    contributions: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tracks": [track.to_dict() for track in self.tracks],
            "contributions": dict(self.contributions),
        }

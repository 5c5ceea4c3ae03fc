"""SongPad: syllable counts and rhyme groups for lyric drafts."""

__version__ = "0.1.0"

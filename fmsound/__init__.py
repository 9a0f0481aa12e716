"""PSG synthesis, audio sample decoders, byte streams, events, LFO and score modelling."""

__version__ = "0.1.0"

__all__ = ["bufferdata", "codec", "errors", "event", "inputstream", "lfo", "psg", "score"]
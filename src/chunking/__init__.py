from conllukit.chunking.sentence_chunker import SentenceChunker, split_conllu

__all__ = ["SentenceChunker", "split_conllu"]

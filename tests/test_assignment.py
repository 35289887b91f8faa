"""Tests for free-text splitting and token-to-gene assignment."""

import pytest

from roller_engine import (
    GeneSpec,
    GeneDictionary,
    OddsType,
    ErrorKind,
    InsufficientTokensError,
    UnassignableGeneError,
    split_gene_string,
    assign_tokens_to_genes,
)


class TestSplitGeneString:

    def test_mixed_separators(self):
        assert split_gene_string('Ee/Aa, nZ  ee') == ['Ee', 'Aa', 'nZ', 'ee']

    def test_leading_and_trailing_separators(self):
        assert split_gene_string(' /Ee,, aa/ ') == ['Ee', 'aa']

    @pytest.mark.parametrize('raw', ['', '   ', ' / , '])
    def test_blank_input(self, raw):
        assert split_gene_string(raw) == []


class TestAssignTokensToGenes:

    def test_input_order_does_not_matter(self, equine_dictionary):
        forward = assign_tokens_to_genes(['aa', 'ee'], equine_dictionary)
        backward = assign_tokens_to_genes(['ee', 'aa'], equine_dictionary)

        assert forward == ['ee', 'aa', '']
        assert backward == forward

    def test_percentage_token_goes_to_its_slot(self, equine_dictionary):
        assert assign_tokens_to_genes(['nZ', 'aa', 'ee'], equine_dictionary) == ['ee', 'aa', 'nZ']

    def test_unmatched_percentage_gene_left_empty(self, equine_dictionary):
        assert assign_tokens_to_genes(['Ee', 'AtA', 'Zn'], equine_dictionary) == ['Ee', 'AtA', '']

    def test_extra_tokens_are_ignored(self, equine_dictionary):
        tokens = ['Ee', 'Aa', 'ZZ', 'nZ', 'ee']
        assert assign_tokens_to_genes(tokens, equine_dictionary) == ['Ee', 'Aa', 'ZZ']

    def test_insufficient_tokens(self, equine_dictionary):
        with pytest.raises(InsufficientTokensError) as exc_info:
            assign_tokens_to_genes(['ee'], equine_dictionary)

        error = exc_info.value
        assert error.kind == ErrorKind.INSUFFICIENT_TOKENS
        assert error.context == {'genes': ['black', 'agouti'], 'required': 2, 'supplied': 1}
        assert 'need 2 (for black, agouti), got 1' in error.message

    def test_unassignable_gene(self, equine_dictionary):
        with pytest.raises(UnassignableGeneError) as exc_info:
            assign_tokens_to_genes(['ee', 'Ee'], equine_dictionary)

        error = exc_info.value
        assert error.kind == ErrorKind.UNASSIGNABLE_GENE
        assert error.context == {'gene': 'agouti', 'alleles': ['At', 'A', 'a']}

    def test_first_fit_can_miss_a_valid_global_assignment(self):
        # first=AA, second=aa would not fit, but first=aa, second=AA would
        dictionary = GeneDictionary(genes=[
            GeneSpec('first', OddsType.PUNNETT, ['A', 'a']),
            GeneSpec('second', OddsType.PUNNETT, ['A', 'B']),
        ])

        with pytest.raises(UnassignableGeneError) as exc_info:
            assign_tokens_to_genes(['AA', 'aa'], dictionary)
        assert exc_info.value.context['gene'] == 'second'

    def test_percentage_only_dictionary_accepts_no_tokens(self):
        dictionary = GeneDictionary(genes=[
            GeneSpec('silver', OddsType.PERCENTAGE, ['Z']),
        ])
        assert assign_tokens_to_genes([], dictionary) == ['']

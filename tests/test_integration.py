"""Integration tests for the complete prettifier workflow."""
import pytest
from prettifier import main as cli
from prettifier.config import Config


class TestIntegration:
    """Integration tests for complete workflows."""

    @pytest.fixture
    def lookup_path(self, tmp_path):
        """Airport lookup in the OurAirports column layout."""
        path = tmp_path / 'airport-lookup.csv'
        path.write_text(
            'name,iso_country,municipality,icao_code,iata_code,coordinates\n'
            'Hannover Airport,DE,Hannover,EDDV,HAJ,"9.68, 52.46"\n'
            'Bremen Airport,DE,Bremen,EDDW,BRE,"8.78, 53.04"\n'
            'London Heathrow Airport,GB,London,EGLL,LHR,"-0.46, 51.47"\n',
            encoding='utf-8'
        )
        return path

    @pytest.fixture
    def input_path(self, tmp_path):
        """Itinerary using every marker family."""
        path = tmp_path / 'input.txt'
        path.write_text(
            '\n'
            'Your flight departs from #HAJ, and your destination is ##EDDW.\\v\n'
            '*#LHR is a big city. #ZZZ is not known.\n'
            '\n'
            '\n'
            '\n'
            'Date: D(2022-05-09T08:07Z)\n'
            'Departure: T12(2022-05-09T08:07Z)\n'
            'Arrival: T24(2022-05-09T10:50-02:00)\\rConnection: T12(2022-05-09T13:05+01:00)\n'
            'Broken: D(2022-5-9)\n',
            encoding='utf-8'
        )
        return path

    def test_full_itinerary(self, input_path, lookup_path, tmp_path, monkeypatch, capsys):
        """Test converting a complete itinerary end to end."""
        monkeypatch.setattr(Config, 'PRETTIFIER_COLOR', '')
        output_path = tmp_path / 'output.txt'

        result = cli.main([str(input_path), str(output_path), str(lookup_path), '--color', '3'])

        assert result == 0
        assert output_path.read_text(encoding='utf-8').splitlines() == [
            '',
            'Your flight departs from Hannover Airport, and your destination is Bremen Airport.',
            '',
            'London is a big city. #ZZZ is not known.',
            '',
            'Date: 09 May 2022',
            'Departure: 08:07AM (+00:00)',
            'Arrival: 10:50 (-02:00) \U0001F552 Note: -02:00 means 2 hours behind standard time',
            'Connection: 01:05PM (+01:00) \U0001F552 Note: +01:00 means 1 hour ahead standard time',
            'Broken: D(2022-5-9)',
        ]

        console = capsys.readouterr().out
        assert "\u001B[33mHannover Airport\u001B[0m" in console
        assert "\u001B[33mLondon\u001B[0m" in console

    def test_line_endings(self, lookup_path, tmp_path, monkeypatch):
        """Test that CRLF, CR and LF all end a record but form feeds do not."""
        monkeypatch.setattr(Config, 'PRETTIFIER_COLOR', '2')
        input_path = tmp_path / 'input.txt'
        input_path.write_bytes(b'From #BRE\r\nto #HAJ\rvia \x0c#LHR\n')
        output_path = tmp_path / 'output.txt'

        assert cli.main([str(input_path), str(output_path), str(lookup_path)]) == 0
        assert output_path.read_text(encoding='utf-8').split('\n') == [
            'From Bremen Airport',
            'to Hannover Airport',
            'via \x0cLondon Heathrow Airport',
            '',
        ]

    def test_output_has_no_color_directives(self, input_path, lookup_path, tmp_path, monkeypatch):
        """Test that nothing ANSI reaches the output file."""
        monkeypatch.setattr(Config, 'PRETTIFIER_COLOR', '5')
        output_path = tmp_path / 'output.txt'

        assert cli.main([str(input_path), str(output_path), str(lookup_path)]) == 0
        assert '\u001B' not in output_path.read_text(encoding='utf-8')

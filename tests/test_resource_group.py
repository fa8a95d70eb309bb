import unittest
from vmstarter.utils import parse_resource_group
from vmstarter.azure.typedefs import azure_vm_from_json


class TestParseResourceGroup(unittest.TestCase):

    def test_resource_group_is_parsed_from_vm_id(self):
        vm_id = '/subscriptions/sub-1/resourceGroups/rg-a/providers/Microsoft.Compute/virtualMachines/vm1'
        self.assertEqual(parse_resource_group(vm_id), 'rg-a')

    def test_missing_marker_gives_empty_string(self):
        self.assertEqual(parse_resource_group('/subscriptions/sub-1/providers/Microsoft.Compute/virtualMachines/vm1'), '')
        self.assertEqual(parse_resource_group(''), '')

    def test_marker_is_case_sensitive(self):
        self.assertEqual(parse_resource_group('/subscriptions/sub-1/resourcegroups/rg-a/providers/x'), '')

    def test_resource_group_at_end_of_id(self):
        self.assertEqual(parse_resource_group('/subscriptions/sub-1/resourceGroups/rg-tail'), 'rg-tail')

    def test_first_marker_wins(self):
        vm_id = '/subscriptions/s/resourceGroups/first/providers/p/resourceGroups/second/x'
        self.assertEqual(parse_resource_group(vm_id), 'first')

    def test_vm_gets_resource_group_from_its_own_id(self):
        vm = azure_vm_from_json({
            'id': '/subscriptions/sub-1/resourceGroups/RG-Mixed.Case_1/providers/Microsoft.Compute/virtualMachines/vm1',
            'name': 'vm1'
        })
        self.assertEqual(vm.name, 'vm1')
        self.assertEqual(vm.resource_group, 'RG-Mixed.Case_1')

# Checkpoint data shipped with each release. Adding a checkpoint is an edit
# to this file only.
#
# What makes a good checkpoint block?
# + Is surrounded by blocks with reasonable timestamps
#   (no blocks before with a timestamp after, none after with
#    timestamp before)
# + Contains no strange transactions

MAIN_CHECKPOINTS = [
    (0, "0x00000c31cbfa287f2bc7c6c5634475883af72c6dd47cd3d27341bc668f731c81"),
    (1, "0x00000e42c6e6ec223410e7916d11d9483e24933594aed7d326338cd32381f334"),
    (4700, "0x00000000bd96f25c5fe68b003e665445a94a050182e23c37022438f9caffe472"),
    (31124, "0x000000001f3316fd17ecb40019bfae299a5e7f40c8cea57bd3e34237c4c04638"),
    (53233, "0x00000000fbcda674f094486c1684ca0cc99f537576b4d3445babe6ad21a23db2"),
    (66437, "0x00000000b445027f5b4f117f5d2e76d3352cff67375ecf265dc1d5d9f157c239"),
    (71621, "0x000000007c35a5ce3ef7c77f7aa535a88e1ed03b9793be4d46d9c462504e2aa1"),
    (92490, "0x000000003050d117a6d410057be32506be8ad02a96c27e08dd3f7a41b8671ce7"),
    (150000, "0x00000001b5e05ebcc219012b7c7832d28d86d3249e3387d8593e6c7148bb3547"),
    (200000, "0x000000012d9d0aba3f4af54bbc2788efeb28d28d4b23a9923dec67d25d454394"),
    (250000, "0x000000002c704d9fac463bcde288626d94e610ee288e21574b9919650f87d8c0"),
    (300000, "0x000000086b931f20226dc9759ed7e6ea479fceec308812ecba1463be11837e4b"),
    (350000, "0x000000023fc820dec0cd6c35fcf239e1c99145cd19c6a985199cf0bbc3ae07fd"),
    (400000, "0x0000000088b3390955e9de9a802e8399e44290d16fd72f787c6f0af1b8d46899"),
    (450000, "0x000002392b10bda48faddaf4b855ba51bcde527bf16c91131fa390ae8022fb7c"),
    (500000, "0x000000c8d4e43f5579c728e870198ea236daddae7f6bea62003e993ccb657ac9"),
]

MAIN_CALIBRATION = {
    # UNIX timestamp of the last checkpoint block
    "last_checkpoint_timestamp": 1507133860,
    # The released table never measured a transaction count for block
    # 500000: its positional initializer left the count out, so the 1000
    # meant as the daily rate became the count and the rate stayed 0.
    # These are the values nodes have actually run with.
    "transactions_at_last_checkpoint": 1000,
    "estimated_transactions_per_day": 0.0,
}

TEST_CHECKPOINTS = [
    (0, "0x332865499df77f269f1fa1c640075275abc3b452c21619bfe05f757a65a46c48"),
]

TEST_CALIBRATION = {
    "last_checkpoint_timestamp": 1394545201,
    "transactions_at_last_checkpoint": 0,
    "estimated_transactions_per_day": 100.0,
}
